"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from meh.util.di import PROVIDERS, Component, get_provider

# Components that have a mock implementation
MOCKABLE: set[str] = {
    base.__mock_component__ for base in PROVIDERS if base.__mock_component__
}


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Args:
        unmock: Components that get their production implementation,
            e.g. {"persistence"} for tests against a real database

    Raises:
        ValueError: If unmock names an unknown component
    """
    unmock = unmock or set()
    unknown = set(unmock) - MOCKABLE
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(
            base,
            use_mock=bool(base.__mock_component__)
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    # FastapiProvider lets the same container serve the e2e tests
    return make_async_container(*providers, FastapiProvider())
