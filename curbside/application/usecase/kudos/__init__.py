"""Kudos use cases."""

from .add_kudos import AddKudosRequest, AddKudosResponse, AddKudosUseCase
from .remove_kudos import RemoveKudosRequest, RemoveKudosResponse, RemoveKudosUseCase

__all__ = [
    "AddKudosRequest",
    "AddKudosResponse",
    "AddKudosUseCase",
    "RemoveKudosRequest",
    "RemoveKudosResponse",
    "RemoveKudosUseCase",
]
