"""Test providers and container builder."""

from .clock import TEST_EPOCH, ManualClockProvider
from .container import build_test_container

__all__ = [
    "TEST_EPOCH",
    "ManualClockProvider",
    "build_test_container",
]
