"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests swap for in-process fakes
Component = Literal["persistence", "clock"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class that sets ``__mock_component__`` is the base of a
    swappable component; its subclasses are the production implementation
    and the test fake, told apart by ``__is_mock__``.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is a test implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
