__all__ = ["EmptyTreeError"]

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EmptyTreeError(Exception):
    def __str__(self) -> str:
        return "Expected a non-empty tree to decompose, but got an empty tree"
