"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components whose provider can be swapped for a mock in tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick mock or production wiring.

    ``__mock_component__`` names the component on its mockable base class;
    ``__is_mock__`` marks the test implementation among its subclasses.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
