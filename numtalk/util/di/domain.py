"""Domain service providers."""

from dishka import Scope, provide

from numtalk.config import AuthSettings
from numtalk.domain.repository import PostRepository
from numtalk.domain.service import JWTService, PostService
from numtalk.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Per-request services, sharing the request's repository and session."""

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        return PostService(post_repository=post_repository)
