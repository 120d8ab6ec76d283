"""Unit tests for CreatePostUseCase and ListPostsUseCase."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from numtalk.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsUseCase,
)
from numtalk.domain.error import ValidationError
from tests.conftest import make_identity
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_chain_post_view_uses_camel_case(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)

        view = await use_case.execute(
            CreatePostRequest(identity=make_identity(), start_number=5)
        )
        body = view.model_dump(by_alias=True)

        assert body["startNumber"] == 5
        assert body["text"] is None
        assert body["comments"] == []
        root = body["nodes"][0]
        assert root["result"] == 5
        assert root["op"] is None
        assert root["parentId"] is None
        assert root["rightOperand"] is None
        assert root["authorId"] == "user-1"
        assert root["authorName"] == "alice"

    @pytest.mark.asyncio
    async def test_text_post_view(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)

        view = await use_case.execute(
            CreatePostRequest(identity=make_identity(), text="hello")
        )

        assert view.text == "hello"
        assert view.nodes == []
        assert view.comments == []
        assert view.start_number is None

    @pytest.mark.parametrize("start_number", ["5", True])
    def test_request_rejects_non_numbers(self, start_number):
        """Numeric strings and booleans are not start numbers."""
        with pytest.raises(PydanticValidationError):
            CreatePostRequest(identity=make_identity(), start_number=start_number)

    def test_request_accepts_int_start_number(self):
        request = CreatePostRequest(identity=make_identity(), start_number=7)

        assert request.start_number == 7

    @pytest.mark.asyncio
    async def test_empty_request_fails(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(CreatePostRequest(identity=make_identity()))


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_created_posts(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        list_posts = await unit_env.get(ListPostsUseCase)

        first = await create.execute(
            CreatePostRequest(identity=make_identity(), text="first")
        )
        second = await create.execute(
            CreatePostRequest(identity=make_identity(), start_number=1)
        )

        result = await list_posts.execute()

        assert {p.id for p in result.posts} == {first.id, second.id}
