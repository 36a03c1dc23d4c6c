import pytest
from returns.result import Failure, Success

from bstset import DuplicateElementError, EmptySetError, MissingElementError, TreeSet
from bstset.script import ElementType, InvalidElementError, evaluate_script, parse_script
from bstset.script.ast import Add, Clear, Contains, Remove, RemoveAny, Script, Size

script_strings = [
    ("", Script(())),
    ("size", Script((Size(),))),
    ("add a", Script((Add("a"),))),
    ("add a;", Script((Add("a"),))),
    ("add a; remove b", Script((Add("a"), Remove("b")))),
    ("  add a ;\n contains  b ; ", Script((Add("a"), Contains("b")))),
    ('add ""; add " "; add "  "', Script((Add(""), Add(" "), Add("  ")))),
    ('add "a;b"', Script((Add("a;b"),))),
    ("remove_any; clear", Script((RemoveAny(), Clear()))),
    ("remove remove_any", Script((Remove("remove_any"),))),
    ("add add", Script((Add("add"),))),
]


@pytest.mark.parametrize(("string", "script"), script_strings)
def test_parse_script(string, script):
    actual = parse_script(string).unwrap()
    assert actual == script


@pytest.mark.parametrize(
    "string",
    ["add", "remove", "insert a", "add a add b", "remove_anyx", "sizes", 'add "a', "add a;;"],
)
def test_parse_bad_script(string):
    actual = parse_script(string)
    assert isinstance(actual, Failure)


def test_deparse_script():
    script = Script((Add(""), Contains("a b"), Remove("c"), RemoveAny(), Size(), Clear()))

    assert script.deparse() == 'add ""; contains "a b"; remove c; remove_any; size; clear'
    assert parse_script(str(script)).unwrap() == script


def test_evaluate_script():
    script = parse_script("add b; add a; add c; contains a; remove b; contains b; size").unwrap()

    evaluation = evaluate_script(script).unwrap()

    assert evaluation.outputs == ("true", "'b'", "false", "2")
    assert list(evaluation.tree_set) == ["a", "c"]


def test_evaluate_remove_any():
    script = parse_script('add "1"; add "11"; add "111"; remove_any; size').unwrap()

    evaluation = evaluate_script(script).unwrap()

    assert evaluation.outputs == ("'1'", "2")


def test_evaluate_clear():
    script = parse_script("add a; clear; add a; size").unwrap()

    evaluation = evaluate_script(script).unwrap()

    assert evaluation.outputs == ("1",)


def test_evaluate_integers():
    script = parse_script("add 10; add 9; add 100; remove_any").unwrap()

    evaluation = evaluate_script(script, ElementType.integer).unwrap()

    assert evaluation.outputs == ("9",)
    assert list(evaluation.tree_set) == [10, 100]


def test_evaluate_into_existing_set():
    tree_set = TreeSet("x")
    script = parse_script("add y").unwrap()

    match evaluate_script(script, tree_set=tree_set):
        case Success(evaluation):
            assert evaluation.tree_set is tree_set
        case _:
            raise AssertionError()

    assert list(tree_set) == ["x", "y"]


@pytest.mark.parametrize(
    ("string", "error_type"),
    [
        ("add a; add a", DuplicateElementError),
        ("remove a", MissingElementError),
        ("remove_any", EmptySetError),
        ("add a; clear; remove_any", EmptySetError),
    ],
)
def test_evaluate_contract_violation(string, error_type):
    script = parse_script(string).unwrap()

    actual = evaluate_script(script)

    assert isinstance(actual, Failure)
    assert isinstance(actual.failure(), error_type)


def test_evaluate_invalid_integer():
    script = parse_script("add 1; add one").unwrap()

    actual = evaluate_script(script, ElementType.integer)

    assert isinstance(actual, Failure)
    assert actual.failure() == InvalidElementError("one", ElementType.integer)
    assert str(actual.failure()) == "Expected element to be of type integer, but got 'one'"
