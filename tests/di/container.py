"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from curbside.util.clock import ManualClock
from curbside.util.di import PROVIDERS, Component, get_provider

from .clock import ManualClockProvider


def build_test_container(
    unmock: set[Component] | None = None,
    clock: ManualClock | None = None,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Mockable components use their non-production implementation unless
    listed in `unmock`: persistence is the in-memory store, the clock is a
    ManualClock starting at TEST_EPOCH.

    Args:
        unmock: Components to use production implementations for
        clock: Clock to serve when the clock component is mocked

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real PostgreSQL, settings from env
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__mock_component__", None)
        use_mock = component_name is not None and component_name not in unmock
        provider_class = get_provider(base, use_mock=use_mock)

        if provider_class is ManualClockProvider:
            provider_instances.append(ManualClockProvider(clock))
        else:
            provider_instances.append(provider_class())

    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Raises:
        ValueError: If a component is not mockable
    """
    all_components = {
        getattr(p, "__mock_component__")
        for p in PROVIDERS
        if getattr(p, "__mock_component__", None)
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
