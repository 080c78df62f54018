"""
Main Typer app and command definitions for Complexity CLI.
"""

from typing import Optional

import typer

from .completions import Completions
from .decorators import with_error_handling
from .handlers import CommandHandlers
from .options import resolve_options

app = typer.Typer(
    help="Complexity CLI - estimate the Big-O time complexity of source code",
    add_completion=True,
    rich_markup_mode="markdown",
)


# ---- Commands ----


@app.command()
@with_error_handling
def analyze(
    source: str = typer.Argument(..., help="Source file to analyze, or '-' for stdin"),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Programming language (inferred from the file extension if omitted)",
        autocompletion=Completions.languages,
    ),
    detailed: bool = typer.Option(
        False, "--detailed", "-d", help="Show loop and recursion signals"
    ),
    runtime: Optional[float] = typer.Option(
        None, "--runtime", help="Observed runtime in milliseconds"
    ),
    memory: Optional[int] = typer.Option(
        None, "--memory", help="Observed memory usage in bytes"
    ),
    memory_limit: Optional[int] = typer.Option(
        None,
        "--memory-limit",
        help="Memory limit in bytes shown next to the usage (default 128 MiB)",
    ),
    output_file: Optional[str] = typer.Option(
        None,
        "--output-file",
        help="Captured program output, used to estimate memory when --memory is absent",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to file"),
):
    """Estimate the time complexity of a source file."""
    options = resolve_options(
        language_override=language,
        config_override=config,
        debug_override=debug,
        verbose_override=verbose,
        log_file=log_file,
    )
    CommandHandlers.handle_analyze(
        options,
        source,
        detailed=detailed,
        runtime=runtime,
        memory=memory,
        output_file=output_file,
        as_json=as_json,
        memory_limit=memory_limit,
    )


@app.command()
@with_error_handling
def curves(
    highlight: Optional[str] = typer.Option(
        None,
        "--highlight",
        help="Complexity class to highlight, e.g. 'O(n log n)'",
        autocompletion=Completions.complexities,
    ),
    domain_size: Optional[int] = typer.Option(
        None, "--domain-size", "-n", help="Number of input sizes (default 101)"
    ),
    step: int = typer.Option(10, "--step", "-s", help="Show every step-th input size"),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
):
    """Print the reference growth curves."""
    options = resolve_options(config_override=config, debug_override=debug)
    CommandHandlers.handle_curves(
        options, highlight=highlight, domain_size=domain_size, step=step
    )


@app.command()
@with_error_handling
def visualize(
    source: str = typer.Argument(..., help="Source file to analyze, or '-' for stdin"),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        "-l",
        help="Programming language (inferred from the file extension if omitted)",
        autocompletion=Completions.languages,
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="HTML file to write (temp file if omitted)"
    ),
    runtime: Optional[float] = typer.Option(
        None, "--runtime", help="Observed runtime in milliseconds"
    ),
    memory: Optional[int] = typer.Option(
        None, "--memory", help="Observed memory usage in bytes"
    ),
    memory_limit: Optional[int] = typer.Option(
        None,
        "--memory-limit",
        help="Memory limit in bytes shown next to the usage (default 128 MiB)",
    ),
    output_file: Optional[str] = typer.Option(
        None,
        "--output-file",
        help="Captured program output, used to estimate memory when --memory is absent",
    ),
    open_browser: Optional[bool] = typer.Option(
        None, "--open/--no-open", help="Open the chart in the default browser"
    ),
    config: Optional[str] = typer.Option(None, "--config", help="Config file"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
):
    """Write an HTML chart comparing the estimate with every reference curve."""
    options = resolve_options(
        language_override=language, config_override=config, debug_override=debug
    )
    CommandHandlers.handle_visualize(
        options,
        source,
        output_path=output,
        runtime=runtime,
        memory=memory,
        output_file=output_file,
        open_browser=open_browser,
        memory_limit=memory_limit,
    )


@app.command()
@with_error_handling
def languages():
    """List supported languages, aliases and file extensions."""
    CommandHandlers.handle_languages()


if __name__ == "__main__":
    app()
