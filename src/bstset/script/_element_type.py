__all__ = ["ElementType"]

from enum import Enum


class ElementType(str, Enum):
    """How the element tokens of a script are interpreted.

    Attributes
    ----------
    text
        Elements are strings, ordered lexicographically.
    integer
        Elements are parsed as integers, ordered numerically.
    """

    # Python 3.10 does not support StrEnum, so do it manually
    text = "text"
    integer = "integer"

    def convert(self, token: str):
        match self:
            case ElementType.text:
                return token
            case ElementType.integer:
                return int(token)
            case _:
                raise NotImplementedError()

    def __str__(self) -> str:
        return self.name
