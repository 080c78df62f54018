"""
Decorators for Complexity CLI commands.
"""

import traceback
from functools import wraps
from typing import Callable

import typer
from rich.markup import escape

from complexity_cli.output import console


def with_error_handling(func: Callable) -> Callable:
    """Decorator to turn uncaught errors in CLI commands into exit code 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            # Paths and messages may contain brackets rich would read as markup
            console.print(
                f"[bold red]Error in {func.__name__}:[/bold red] {escape(str(e))}"
            )
            if kwargs.get("debug"):
                console.print(traceback.format_exc(), markup=False)
            raise typer.Exit(code=1)

    return wrapper
