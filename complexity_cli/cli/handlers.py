"""
Command handlers for Complexity CLI - business logic separated from CLI interface.
"""

import json
from typing import Optional

import typer

from complexity_cli.analyzer import ClassificationResult, ComplexityClassifier
from complexity_cli.complexity import ComplexityClass
from complexity_cli.core import constants
from complexity_cli.core.exceptions import ValidationError
from complexity_cli.core.logging import analysis_context, log_info, timed_command
from complexity_cli.core.source_utils import (
    STDIN_PATH,
    estimate_memory,
    read_source,
    validate_non_negative,
)
from complexity_cli.curves import generate_curves
from complexity_cli.languages import language_from_path
from complexity_cli.output import (
    print_classification,
    print_curve_table,
    print_execution_metrics,
    print_footer,
    print_languages,
    print_visualization_generated,
)
from complexity_cli.visualization import ComplexityVisualizer

from .options import ResolvedOptions


class CommandHandlers:
    """Handles the business logic for CLI commands."""

    classifier = ComplexityClassifier()

    @staticmethod
    def pick_language(options: ResolvedOptions, source_path: str) -> str:
        """Flag or config language, then file extension, then the default."""
        if options.language:
            return options.language
        inferred = None if source_path == STDIN_PATH else language_from_path(source_path)
        return inferred or constants.DEFAULT_LANGUAGE

    @staticmethod
    def resolve_memory(
        memory: Optional[int], output_file: Optional[str]
    ) -> Optional[int]:
        """Observed memory, or an estimate from captured program output.

        A reported usage of zero counts as missing, so captured output still
        yields an estimate.
        """
        validate_non_negative("Memory", memory)
        if not memory and output_file:
            return estimate_memory(read_source(output_file))
        return memory

    @staticmethod
    def resolve_memory_limit(
        options: ResolvedOptions, memory_limit: Optional[int]
    ) -> int:
        """The --memory-limit flag, falling back to the configured limit."""
        validate_non_negative("Memory limit", memory_limit)
        if memory_limit is None:
            return options.config.memory_limit_bytes
        return memory_limit

    @staticmethod
    @timed_command("analyze_command")
    def handle_analyze(
        options: ResolvedOptions,
        source_path: str,
        detailed: bool = False,
        runtime: Optional[float] = None,
        memory: Optional[int] = None,
        output_file: Optional[str] = None,
        as_json: bool = False,
        memory_limit: Optional[int] = None,
    ) -> ClassificationResult:
        """Handle the analyze command."""
        language = CommandHandlers.pick_language(options, source_path)
        validate_non_negative("Runtime", runtime)
        memory = CommandHandlers.resolve_memory(memory, output_file)
        memory_limit = CommandHandlers.resolve_memory_limit(options, memory_limit)

        with analysis_context(language=language, source=source_path):
            source_text = read_source(source_path)
            report = CommandHandlers.classifier.scan(source_text, language)
            result = ClassificationResult.of(
                CommandHandlers.classifier.decide(report, source_text)
            )
            log_info(f"Estimated {result.complexity} for {source_path}")

        if as_json:
            payload = result.to_dict()
            payload["language"] = report.language
            payload["runtime_ms"] = runtime
            payload["memory_bytes"] = memory
            if detailed:
                payload["loop_count"] = report.loop_count
                payload["max_nested_loops"] = report.max_nested_loops
                payload["has_recursion"] = report.has_recursion
            typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
            return result

        print_classification(result, source_path, report if detailed else None)
        if runtime is not None or memory is not None:
            print_execution_metrics(runtime, memory, memory_limit)
        print_footer()
        return result

    @staticmethod
    @timed_command("curves_command")
    def handle_curves(
        options: ResolvedOptions,
        highlight: Optional[str] = None,
        domain_size: Optional[int] = None,
        step: int = 10,
    ):
        """Handle the curves command."""
        chart = options.config.chart
        domain_size = domain_size if domain_size is not None else chart.domain_size
        if domain_size < 1:
            raise ValidationError(f"Domain size must be at least 1, got {domain_size}")

        highlighted_label = None
        if highlight:
            try:
                highlighted_label = ComplexityClass.from_label(highlight).label
            except ValueError as e:
                raise ValidationError(str(e)) from e

        curves = generate_curves(domain_size)
        print_curve_table(
            curves,
            highlighted=highlighted_label,
            sample_step=step,
            ceiling=chart.value_ceiling,
        )

    @staticmethod
    @timed_command("visualize_command")
    def handle_visualize(
        options: ResolvedOptions,
        source_path: str,
        output_path: Optional[str] = None,
        runtime: Optional[float] = None,
        memory: Optional[int] = None,
        output_file: Optional[str] = None,
        open_browser: Optional[bool] = None,
        memory_limit: Optional[int] = None,
    ) -> str:
        """Handle the visualize command."""
        chart = options.config.chart
        language = CommandHandlers.pick_language(options, source_path)
        validate_non_negative("Runtime", runtime)
        memory = CommandHandlers.resolve_memory(memory, output_file)
        memory_limit = CommandHandlers.resolve_memory_limit(options, memory_limit)

        with analysis_context(language=language, source=source_path):
            result = CommandHandlers.classifier.classify(
                read_source(source_path), language
            )

        if output_path is None and options.config.get_output_dir() is not None:
            output_dir = options.config.get_output_dir()
            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = str(output_dir / constants.CHART_FILENAME)

        visualizer = ComplexityVisualizer(
            result,
            generate_curves(chart.domain_size),
            runtime_ms=runtime,
            memory_bytes=memory,
            memory_limit_bytes=memory_limit,
            ceiling=chart.value_ceiling,
            sample_step=chart.sample_step,
            dimmed_opacity=chart.dimmed_opacity,
        )
        should_open = chart.open_browser if open_browser is None else open_browser
        html_file = visualizer.visualize(output_path, open_browser=should_open)
        print_visualization_generated(html_file, opened=should_open)
        return html_file

    @staticmethod
    def handle_languages():
        """Handle the languages command."""
        print_languages(
            constants.SUPPORTED_LANGUAGES,
            constants.LANGUAGE_ALIASES,
            constants.LANGUAGE_EXTENSIONS,
        )
