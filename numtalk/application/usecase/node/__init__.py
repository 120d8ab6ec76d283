"""Numeric chain use cases."""

from .extend_chain import ExtendChainRequest, ExtendChainUseCase

__all__ = [
    "ExtendChainRequest",
    "ExtendChainUseCase",
]
