__all__ = ["app"]

import logging
from typing import Annotated

import typer
from returns.result import Failure, Success

from .script import ElementType, evaluate_script, parse_script
from .tree import render

app = typer.Typer()


@app.command()
def bstset(
    script: Annotated[
        str,
        typer.Argument(
            show_default=False,
            help='The statements to run against an empty set, e.g. add b; add a; remove "b".',
        ),
    ],
    element_type: Annotated[
        ElementType,
        typer.Option(
            "--type",
            "-t",
            help="How the elements in the script are interpreted and ordered.",
        ),
    ] = ElementType.text,
    show_tree: Annotated[
        bool,
        typer.Option(
            "--tree",
            help="Also print the shape of the binary search tree holding the final set.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every operation on the set to standard error.",
        ),
    ] = False,
):
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=log_level)
    logging.getLogger("bstset").setLevel(log_level)

    # Parse script
    match parse_script(script):
        case Failure(error):
            typer.echo(f"Failed to parse script:\n{error}", err=True)
            raise typer.Exit(1)
        case Success(parsed_script):
            pass
        case _:
            raise NotImplementedError()

    # Run script
    match evaluate_script(parsed_script, element_type):
        case Failure(error):
            typer.echo(str(error), err=True)
            raise typer.Exit(1)
        case Success(evaluation):
            pass
        case _:
            raise NotImplementedError()

    for output in evaluation.outputs:
        typer.echo(output)
    typer.echo(repr(evaluation.tree_set))
    if show_tree:
        typer.echo(render(evaluation.tree_set.tree))
