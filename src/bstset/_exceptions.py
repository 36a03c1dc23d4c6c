__all__ = [
    "SetContractError",
    "DuplicateElementError",
    "MissingElementError",
    "EmptySetError",
    "SelfTransferError",
]

from dataclasses import dataclass
from typing import Any


class SetContractError(Exception):
    """A precondition of a set operation was not met by the caller."""


@dataclass(frozen=True, slots=True)
class DuplicateElementError(SetContractError, ValueError):
    element: Any

    def __str__(self) -> str:
        return (
            "Expected element to be absent from the set before adding it, "
            f"but found {self.element!r}"
        )


@dataclass(frozen=True, slots=True)
class MissingElementError(SetContractError, KeyError):
    element: Any

    def __str__(self) -> str:
        return (
            "Expected element to be in the set before removing it, "
            f"but {self.element!r} is absent"
        )


@dataclass(frozen=True, slots=True)
class EmptySetError(SetContractError, KeyError):
    def __str__(self) -> str:
        return "Cannot remove an element from an empty set"


@dataclass(frozen=True, slots=True)
class SelfTransferError(SetContractError, ValueError):
    def __str__(self) -> str:
        return "Cannot transfer the contents of a set into itself"
