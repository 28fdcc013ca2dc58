"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .kudos_service import KudosService
from .participation_gate import ParticipationGate
from .post_assembler import PostAssembler
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "CommentService",
    "JWTService",
    "KudosService",
    "ParticipationGate",
    "PostAssembler",
    "PostService",
    "Service",
    "UserService",
]
