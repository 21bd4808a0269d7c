"""Command-line entrypoints for chembalance."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Dict, List

import typer

from chembalance.catalogs import COLLECTIONS, create_collection
from chembalance.config import BalancerConfiguration, load_configuration
from chembalance.equations import Equation
from chembalance.logging import configure_logging
from chembalance.persistence import sqlite_store
from chembalance.preferences import EquationSet, Preferences

app = typer.Typer(add_completion=False)

CollectionOption = Annotated[
    str, typer.Option(help=f"Equation collection: {', '.join(COLLECTIONS)}.")
]


def _load_set(ctx: typer.Context, collection: str) -> EquationSet:
    configuration: BalancerConfiguration = ctx.obj or BalancerConfiguration()
    preferences = Preferences(initial_coefficient=configuration.initial_coefficient)
    try:
        return create_collection(collection, preferences)
    except KeyError as error:
        raise typer.BadParameter(str(error.args[0]), param_hint="--collection") from error


def _get_equation(equation_set: EquationSet, key: str) -> Equation:
    try:
        return equation_set.get(key)
    except KeyError as error:
        raise typer.BadParameter(str(error.args[0]), param_hint="KEY") from error


def _describe(equation: Equation) -> Dict[str, Any]:
    return {
        "equation": equation.key,
        "display": equation.get_display_string(),
        "coefficients": [term.coefficient for term in equation.terms],
        "balanced": equation.is_balanced,
        "simplified": equation.is_simplified,
        "has_nonzero_coefficient": equation.has_nonzero_coefficient,
        "atom_counts": [
            {
                "element": count.element.symbol,
                "reactants": count.reactants_total,
                "products": count.products_total,
            }
            for count in equation.get_atom_counts()
        ],
    }


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        Path | None, typer.Option(help="Path to a JSON configuration file.")
    ] = None,
) -> None:
    """Check chemical equation coefficients against fixed catalogs."""
    try:
        configuration = load_configuration(config)
    except (OSError, ValueError) as error:
        raise typer.BadParameter(str(error), param_hint="--config") from error
    configure_logging(configuration.log_level)
    ctx.obj = configuration


@app.command()
def catalog(ctx: typer.Context, collection: CollectionOption = "intro") -> None:
    """List the equations of a collection."""
    equation_set = _load_set(ctx, collection)
    for equation in equation_set:
        typer.echo(f"{equation.key}\t{equation.get_display_string()}")


@app.command()
def answer(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Equation key, as listed by `catalog`.")],
    collection: CollectionOption = "intro",
) -> None:
    """Print the balanced coefficients of an equation."""
    equation = _get_equation(_load_set(ctx, collection), key)
    typer.echo(equation.get_answer_string())


@app.command()
def check(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Equation key, as listed by `catalog`.")],
    coefficients: Annotated[
        List[int], typer.Argument(help="Coefficients, reactants first.")
    ],
    collection: CollectionOption = "intro",
    project_file: Annotated[
        Path | None,
        typer.Option(help="Optional SQLite project file to persist the state."),
    ] = None,
) -> None:
    """Assign coefficients to an equation and report whether it is balanced."""
    equation_set = _load_set(ctx, collection)
    equation = _get_equation(equation_set, key)
    try:
        equation.set_coefficients(coefficients)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="COEFFICIENTS") from error

    payload = _describe(equation)

    if project_file is not None:
        connection = sqlite_store.connect(project_file)
        try:
            sqlite_store.ensure_schema(connection)
            payload["snapshot_id"] = sqlite_store.save_snapshot(
                connection,
                equation_set,
                name=f"check {key}",
                collection=collection,
                notes="Saved from the chembalance CLI.",
            )
        finally:
            connection.close()

    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def restore(
    ctx: typer.Context,
    project_file: Annotated[Path, typer.Argument(help="SQLite project file.")],
    snapshot_id: Annotated[int, typer.Argument(help="Snapshot to restore.")],
    collection: CollectionOption = "intro",
) -> None:
    """Restore a saved snapshot and report every restored equation."""
    equation_set = _load_set(ctx, collection)
    connection = sqlite_store.connect(project_file)
    try:
        sqlite_store.ensure_schema(connection)
        states = sqlite_store.restore_snapshot(connection, snapshot_id, equation_set)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="SNAPSHOT_ID") from error
    finally:
        connection.close()

    payload = [_describe(equation_set.get(state.key)) for state in states]
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
