"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from jerga.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where mockable components default to their mocks.

    Settings are loaded from environment variables, so integration runs
    point ``DATABASE__URL`` at a disposable Postgres.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit tests - in-memory repositories
        container = build_test_container()

        # Integration tests - real Postgres, frozen clock
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = base.__mock_component__
        if component_name is None:
            provider_class = get_provider(base, use_mock=False)
        else:
            provider_class = get_provider(base, use_mock=component_name not in unmock)
        provider_instances.append(provider_class())

    return make_async_container(*provider_instances)


def _validate_unmock(unmock: set[Component]) -> None:
    known = {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
