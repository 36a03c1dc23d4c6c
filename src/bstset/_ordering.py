from __future__ import annotations

__all__ = ["Comparable", "Element"]

from abc import abstractmethod
from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """An element that can be stored in a search tree.

    The ordering must be total and consistent with `==`, comparison must have no side effects,
    and an element must not change while it is stored.
    """

    @abstractmethod
    def __lt__(self, other: Any, /) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def __eq__(self, other: object, /) -> bool:
        raise NotImplementedError()


Element = TypeVar("Element", bound=Comparable)
