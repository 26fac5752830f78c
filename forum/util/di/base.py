"""Provider base class carrying component metadata."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests replace with in-memory implementations
Component = Literal["media", "persistence"]


class ProviderBase(Provider):
    """dishka provider with swap metadata.

    ``__mock_component__`` names the component a base provides (None for
    providers that are never swapped); ``__is_mock__`` marks the in-memory
    implementation.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
