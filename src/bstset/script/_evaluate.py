from __future__ import annotations

__all__ = ["Evaluation", "evaluate_script"]

import logging
from dataclasses import dataclass
from typing import Any

from returns.result import Failure, Result, Success

from .._exceptions import SetContractError
from .._tree_set import TreeSet
from ._element_type import ElementType
from ._exceptions import InvalidElementError
from .ast import Add, Clear, Contains, Remove, RemoveAny, Script, Size, Statement

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Evaluation:
    """The result of running a script.

    Attributes
    ----------
    outputs
        One line for each statement that reports something, in order: `contains`, `remove`,
        `remove_any`, and `size`.
    tree_set
        The set after the last statement.
    """

    outputs: tuple[str, ...]
    tree_set: TreeSet[Any]


def convert_element(token: str, element_type: ElementType) -> Any:
    try:
        return element_type.convert(token)
    except ValueError:
        raise InvalidElementError(token, element_type) from None


def evaluate_statement(statement: Statement, tree_set: TreeSet, element_type: ElementType):
    """Apply one statement to a set.

    Returns:
        The line reported by the statement, or `None` if it reports nothing.
    """
    match statement:
        case Add(element):
            tree_set.add(convert_element(element, element_type))
            return None
        case Remove(element):
            return repr(tree_set.remove(convert_element(element, element_type)))
        case Contains(element):
            return "true" if convert_element(element, element_type) in tree_set else "false"
        case RemoveAny():
            return repr(tree_set.remove_any())
        case Size():
            return str(len(tree_set))
        case Clear():
            tree_set.clear()
            return None
        case _:
            raise NotImplementedError(f"Unsupported statement type: {type(statement)}")


def evaluate_script(
    script: Script,
    element_type: ElementType = ElementType.text,
    tree_set: TreeSet | None = None,
) -> Result[Evaluation, SetContractError | InvalidElementError]:
    if tree_set is None:
        tree_set = TreeSet()

    outputs = []
    for statement in script.statements:
        logger.debug("Evaluating %s", statement)
        try:
            output = evaluate_statement(statement, tree_set, element_type)
        except (SetContractError, InvalidElementError) as e:
            return Failure(e)
        if output is not None:
            outputs.append(output)

    return Success(Evaluation(tuple(outputs), tree_set))
