__all__ = ["InvalidElementError"]

from dataclasses import dataclass

from ._element_type import ElementType


@dataclass(frozen=True, slots=True)
class InvalidElementError(Exception):
    element: str
    element_type: ElementType

    def __str__(self) -> str:
        return f"Expected element to be of type {self.element_type}, but got {self.element!r}"
