"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase

__all__ = [
    "CreateCommentRequest",
    "CreateCommentUseCase",
]
