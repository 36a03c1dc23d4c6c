from __future__ import annotations

__all__ = [
    "Statement",
    "Add",
    "Remove",
    "Contains",
    "RemoveAny",
    "Size",
    "Clear",
    "Script",
]

from abc import abstractmethod
from dataclasses import dataclass


def deparse_element(element: str) -> str:
    if element == "" or any(character.isspace() or character in ';"' for character in element):
        return f'"{element}"'
    else:
        return element


class Statement:
    __slots__ = ()

    @abstractmethod
    def deparse(self) -> str:
        """Convert the statement back into a string."""
        raise NotImplementedError()

    def __str__(self):
        return self.deparse()


@dataclass(frozen=True, slots=True)
class Add(Statement):
    element: str

    def deparse(self):
        return f"add {deparse_element(self.element)}"


@dataclass(frozen=True, slots=True)
class Remove(Statement):
    element: str

    def deparse(self):
        return f"remove {deparse_element(self.element)}"


@dataclass(frozen=True, slots=True)
class Contains(Statement):
    element: str

    def deparse(self):
        return f"contains {deparse_element(self.element)}"


@dataclass(frozen=True, slots=True)
class RemoveAny(Statement):
    def deparse(self):
        return "remove_any"


@dataclass(frozen=True, slots=True)
class Size(Statement):
    def deparse(self):
        return "size"


@dataclass(frozen=True, slots=True)
class Clear(Statement):
    def deparse(self):
        return "clear"


@dataclass(frozen=True, slots=True)
class Script:
    statements: tuple[Statement, ...]

    def deparse(self) -> str:
        return "; ".join(statement.deparse() for statement in self.statements)

    def __str__(self):
        return self.deparse()
