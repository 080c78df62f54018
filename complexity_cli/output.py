from typing import Any, Optional, Sequence, Union

from rich.box import ROUNDED
from rich.columns import Columns
from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from complexity_cli.analyzer import ClassificationResult, ScanReport
from complexity_cli.core.constants import VALUE_CEILING
from complexity_cli.core.formatting import format_level, format_memory, format_runtime
from complexity_cli.curves import CurveSeries, sample_points

# ==============================================================================
# Constants & Global Console
# ==============================================================================

console = Console()

SUCCESS_STYLE = Style(color="green", bold=True)
INFO_STYLE = Style(color="blue", bold=True)
BOLD_STYLE = Style(bold=True)
DIM_STYLE = Style(dim=True)
CYAN_STYLE = Style(color="cyan")
MAGENTA_STYLE = Style(color="magenta")

# Severity colour per ordinal level band
LEVEL_STYLES = (
    (2, "green"),
    (3.5, "yellow"),
    (5, "dark_orange"),
)
WORST_LEVEL_STYLE = "red"

# ==============================================================================
# Private Helper Functions
# ==============================================================================


def _create_panel(
    content: RenderableType,
    title: Optional[str] = None,
    border_style: Union[str, Style] = "blue",
    padding: tuple = (1, 2),
    box: Any = ROUNDED,
    **kwargs: Any,
) -> Panel:
    """Helper function to create a Rich Panel."""
    return Panel(
        content,
        title=title,
        border_style=border_style,
        padding=padding,
        box=box,
        **kwargs,
    )


def _create_table(
    title: Optional[str] = None,
    box: Any = ROUNDED,
    show_header: bool = True,
    header_style: Union[str, Style] = "bold blue",
    **kwargs: Any,
) -> Table:
    """Helper function to create a Rich Table."""
    return Table(
        title=title,
        box=box,
        show_header=show_header,
        header_style=header_style,
        **kwargs,
    )


def level_style(level: float) -> str:
    """Colour name for an ordinal level, green for cheap through red for exponential."""
    for upper_bound, style in LEVEL_STYLES:
        if level <= upper_bound:
            return style
    return WORST_LEVEL_STYLE


# ==============================================================================
# Classification Output
# ==============================================================================


def print_classification(
    result: ClassificationResult,
    source_name: str,
    report: Optional[ScanReport] = None,
):
    """Display the estimated complexity, with scan signals when a report is given."""
    style = level_style(result.level)
    tree = Tree(f"[bold blue]Source: {escape(source_name)}[/bold blue]")
    tree.add(f"[{style}]Complexity: {result.complexity}[/{style}]")
    tree.add(f"[cyan]Description: {result.description}[/cyan]")
    tree.add(f"[cyan]Level: {format_level(result.level)}[/cyan]")

    if report is not None:
        signals = tree.add("[magenta]Signals[/magenta]")
        signals.add(f"Language patterns: {report.language}")
        signals.add(f"Loops: {report.loop_count}")
        signals.add(f"Max nesting: {report.max_nested_loops}")
        signals.add(f"Recursion signal: {'yes' if report.has_recursion else 'no'}")

    console.print(
        _create_panel(
            tree,
            title="[bold]COMPLEXITY ANALYSIS[/bold]",
            border_style=style,
        )
    )


def print_execution_metrics(
    runtime_ms: Optional[float],
    memory_bytes: Optional[float],
    memory_limit_bytes: Optional[int] = None,
):
    """Display observed runtime and memory next to each other."""
    limit_note = (
        f"Limit: {format_memory(memory_limit_bytes)}"
        if memory_limit_bytes
        else "Memory usage"
    )
    runtime_panel = _create_panel(
        Text.assemble(
            ("Runtime\n", DIM_STYLE), (format_runtime(runtime_ms), BOLD_STYLE)
        ),
        border_style=CYAN_STYLE,
        padding=(0, 2),
    )
    memory_panel = _create_panel(
        Text.assemble(
            ("Memory\n", DIM_STYLE),
            (format_memory(memory_bytes), BOLD_STYLE),
            (f"\n{limit_note}", DIM_STYLE),
        ),
        border_style=MAGENTA_STYLE,
        padding=(0, 2),
    )
    console.print(Columns([runtime_panel, memory_panel]))


# ==============================================================================
# Curve Output
# ==============================================================================


def print_curve_table(
    curves: Sequence[CurveSeries],
    highlighted: Optional[str] = None,
    sample_step: int = 10,
    ceiling: float = VALUE_CEILING,
):
    """Print sampled reference curves as a table, one column per class."""
    table = _create_table(title="[bold]Reference Growth Curves[/bold]")
    table.add_column("n", style=CYAN_STYLE, justify="right")

    for series in curves:
        if series.name == highlighted:
            table.add_column(
                f"{series.name} (Your Code)", style="bold green", justify="right"
            )
        else:
            table.add_column(series.name, style=DIM_STYLE, justify="right")

    if not curves:
        console.print(table)
        return

    sampled = [sample_points(series.capped(ceiling), sample_step) for series in curves]
    for row_index, (x, _) in enumerate(sampled[0]):
        table.add_row(
            str(x),
            *(f"{points[row_index][1]:.2f}" for points in sampled),
        )
    console.print(table)


def print_languages(languages: Sequence[str], aliases: dict, extensions: dict):
    """List supported languages with their aliases and file extensions."""
    table = _create_table(title="[bold]Supported Languages[/bold]")
    table.add_column("Language", style=CYAN_STYLE)
    table.add_column("Aliases", style=DIM_STYLE)
    table.add_column("Extensions", style=DIM_STYLE)

    for language in languages:
        table.add_row(
            language,
            ", ".join(sorted(a for a, lang in aliases.items() if lang == language)),
            ", ".join(sorted(e for e, lang in extensions.items() if lang == language)),
        )
    console.print(table)


def print_footer():
    console.print(Rule(style=INFO_STYLE))


# ==============================================================================
# Visualization Output
# ==============================================================================


def print_visualization_generated(path: str, opened: bool):
    content = Text.assemble(
        ("✓", SUCCESS_STYLE),
        " Visualization generated successfully!\n\n",
        ("File: ", INFO_STYLE),
        f"{path}",
    )
    if opened:
        content.append(
            "\n\nThe visualization has been opened in your default browser.", DIM_STYLE
        )
    console.print(
        _create_panel(
            content,
            title="[green]Success[/green]",
            border_style=SUCCESS_STYLE,
            padding=(1, 2),
        )
    )
