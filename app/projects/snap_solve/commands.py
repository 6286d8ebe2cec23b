import asyncio

import click
from flask import current_app
from flask.cli import with_appcontext

from app.projects.snap_solve.core.evaluator import Evaluator
from app.projects.snap_solve.core.payload import ImagePayload
from app.projects.snap_solve.core.pipeline import ProcessState, SolveSession


@click.group(name='snap-solve')
def snap_solve_cli():
    """Snap & Solve commands."""
    pass


@snap_solve_cli.command('solve')
@click.argument('images', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def solve_command(images):
    """Extract and evaluate the expression in each image."""
    session = SolveSession(current_app.extensions["snap_solve"])
    for path in images:
        try:
            payload = ImagePayload.from_path(path)
        except ValueError as e:
            click.echo(f"{path}: {e}", err=True)
            continue

        click.echo(f"Solving {path}...")
        outcome = asyncio.run(session.submit(payload))
        if outcome.expression:
            click.echo(f"  Expression: {outcome.expression}")
        if outcome.state == ProcessState.SUCCESS:
            click.echo(f"  Result:     {outcome.result}")
        else:
            click.echo(f"  {outcome.error}", err=True)


@snap_solve_cli.command('evaluate')
@click.argument('expression')
def evaluate_command(expression):
    """Evaluate an arithmetic expression locally (no model call)."""
    result = Evaluator().evaluate_result(expression)
    click.echo(result.to_tagged(), err=not result.ok)


def init_app(app):
    """Register CLI commands with the app."""
    app.cli.add_command(snap_solve_cli)
