__all__ = ["parse_script"]

from parsita import ParseError, ParserContext, opt, reg, repsep
from parsita.util import constant
from returns import result

from .ast import Add, Clear, Contains, Remove, RemoveAny, Script, Size


class ScriptParsers(ParserContext, whitespace=r"\s*"):
    quoted_element = reg(r'"[^"]*"') > (lambda x: x[1:-1])
    bare_element = reg(r'[^\s;"]+')
    element = quoted_element | bare_element

    # Keywords end at a word boundary so that "remove" does not match the start of "remove_any"
    add = reg(r"add\b") >> element > Add
    remove = reg(r"remove\b") >> element > Remove
    contains = reg(r"contains\b") >> element > Contains
    remove_any = reg(r"remove_any\b") > constant(RemoveAny())
    size = reg(r"size\b") > constant(Size())
    clear = reg(r"clear\b") > constant(Clear())

    statement = add | remove | contains | remove_any | size | clear

    script = repsep(statement, ";") << opt(";") > (lambda statements: Script(tuple(statements)))


def parse_script(string: str, /) -> result.Result[Script, ParseError]:
    return ScriptParsers.script.parse(string)
