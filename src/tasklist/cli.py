"""tasklist CLI - local task list."""

import json
import logging
import sys

import click

from .app import App, open_app
from .config import load_config
from .core.tasks import Priority, Task, filter_completed

PRIORITY_COLORS = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}

EMPTY_MESSAGE = "Name your task, set your priority then add!"


def _direction_label(high_first: bool) -> str:
    return "High → Low" if high_first else "Low → High"


def _get_app(ctx: click.Context) -> App:
    """Open the app once per invocation, using the config loaded by `main`."""
    if not isinstance(ctx.obj, App):
        try:
            ctx.obj = open_app(ctx.obj)
        except OSError as e:
            click.echo(f"Error: could not open storage: {e}", err=True)
            sys.exit(1)
    return ctx.obj


def _format_task(task: Task) -> str:
    check = "[x]" if task.completed else "[ ]"
    badge = click.style(f"{task.level.label:6}", fg=PRIORITY_COLORS[task.level], bold=True)
    name = click.style(task.name, dim=task.completed)
    done = " (Completed)" if task.completed else ""
    return f"{check} {badge} {name}{done}  {click.style(task.id, dim=True)}"


def _persist_or_exit(action, *args):
    """Run a store mutation; storage write errors are fatal."""
    try:
        return action(*args)
    except OSError as e:
        click.echo(f"Error: could not save: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="tasklist")
@click.pass_context
def main(ctx, debug: bool):
    """tasklist - a local task list."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else getattr(logging, config.log_level),
    )
    ctx.obj = config


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--pending", is_flag=True, help="Only show tasks not yet completed")
@click.pass_context
def list_tasks(ctx, as_json: bool, pending: bool):
    """Show tasks in their current order."""
    app = _get_app(ctx)
    tasks = app.store.tasks
    if pending:
        tasks = filter_completed(tasks, completed=False)

    if as_json:
        click.echo(json.dumps([t.to_record() for t in tasks], indent=2, ensure_ascii=False))
        return

    if not tasks:
        click.echo(EMPTY_MESSAGE)
        return

    for task in tasks:
        click.echo(_format_task(task))


@main.command()
@click.argument("name", nargs=-1, required=True)
@click.option(
    "--priority",
    "-p",
    type=click.Choice([p.name.lower() for p in Priority], case_sensitive=False),
    default=None,
    help="Task priority (default from config)",
)
@click.pass_context
def add(ctx, name: tuple[str, ...], priority: str | None):
    """Add a task."""
    app = _get_app(ctx)
    level = Priority.parse(priority) if priority else app.config.default_priority
    task_id = _persist_or_exit(app.store.add, " ".join(name), level)
    if task_id is None:
        click.echo("Error: task name is empty", err=True)
        sys.exit(1)
    click.echo(task_id)


def _set_completed(ctx, task_id: str, value: bool) -> None:
    app = _get_app(ctx)
    if not _persist_or_exit(app.store.toggle_complete, task_id, value):
        click.echo(f"Error: no task with id {task_id}", err=True)
        sys.exit(1)
    task = app.store.get(task_id)
    click.echo(f"{'Completed' if value else 'Reopened'}: {task.name}")


@main.command()
@click.argument("task_id")
@click.pass_context
def done(ctx, task_id: str):
    """Mark a task complete."""
    _set_completed(ctx, task_id, True)


@main.command()
@click.argument("task_id")
@click.pass_context
def undo(ctx, task_id: str):
    """Mark a task not complete."""
    _set_completed(ctx, task_id, False)


@main.command()
@click.argument("task_id")
@click.pass_context
def delete(ctx, task_id: str):
    """Delete a task."""
    app = _get_app(ctx)
    task = app.store.get(task_id)
    if not _persist_or_exit(app.store.delete, task_id):
        click.echo(f"Error: no task with id {task_id}", err=True)
        sys.exit(1)
    click.echo(f"Deleted: {task.name}")


@main.command("sort")
@click.option(
    "--high-first/--low-first",
    "high_first",
    default=None,
    help="Sort direction (default from SORT_HIGH_FIRST in config)",
)
@click.pass_context
def sort_tasks(ctx, high_first: bool | None):
    """Sort tasks by priority."""
    app = _get_app(ctx)
    if high_first is not None and high_first != app.store.sort_high_first:
        app.store.toggle_sort_direction()
    _persist_or_exit(app.store.sort_by_priority)
    click.echo(f"Sorted by priority ({_direction_label(app.store.sort_high_first)})")


@main.command()
@click.option("--dark/--light", "is_dark", default=None, help="Set the theme")
@click.option("--toggle", is_flag=True, help="Switch between dark and light")
@click.pass_context
def theme(ctx, is_dark: bool | None, toggle: bool):
    """Show, set, or toggle the theme."""
    app = _get_app(ctx)
    if toggle and is_dark is not None:
        raise click.UsageError("--toggle cannot be combined with --dark/--light")
    if toggle:
        _persist_or_exit(app.toggle_theme)
    elif is_dark is not None:
        _persist_or_exit(app.set_theme, is_dark)
    click.echo(f"Theme: {'dark' if app.is_dark else 'light'}")


if __name__ == "__main__":
    main()
