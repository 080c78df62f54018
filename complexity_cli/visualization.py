import html
import json
import os
import tempfile
import webbrowser
from typing import Dict, List, Optional, Sequence

from complexity_cli.analyzer import ClassificationResult
from complexity_cli.core.constants import DIMMED_OPACITY, VALUE_CEILING
from complexity_cli.core.formatting import format_memory, format_runtime
from complexity_cli.core.logging import log_file_operation, log_warning
from complexity_cli.curves import CurveSeries, sample_points, split_highlighted


def _hex_to_rgba(color: str, alpha: float) -> str:
    color = color.lstrip("#")
    red, green, blue = (int(color[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({red}, {green}, {blue}, {alpha})"


class ComplexityVisualizer:
    """
    Renders reference complexity curves as an interactive Chart.js page.

    The series matching the classification is drawn thick and fully opaque;
    the other reference lines are thinner and dimmed. Every value is clamped
    to the ceiling so all curves share one y-axis.
    """

    def __init__(
        self,
        result: ClassificationResult,
        curves: Sequence[CurveSeries],
        runtime_ms: Optional[float] = None,
        memory_bytes: Optional[float] = None,
        memory_limit_bytes: Optional[int] = None,
        ceiling: float = VALUE_CEILING,
        sample_step: int = 2,
        dimmed_opacity: float = DIMMED_OPACITY,
    ):
        self.result = result
        self.curves = list(curves)
        self.runtime_ms = runtime_ms
        self.memory_bytes = memory_bytes
        self.memory_limit_bytes = memory_limit_bytes
        self.ceiling = ceiling
        self.sample_step = sample_step
        self.dimmed_opacity = dimmed_opacity

    def _dataset(self, series: CurveSeries, highlighted: bool) -> Dict:
        points = sample_points(series.capped(self.ceiling), self.sample_step)
        alpha = 1.0 if highlighted else self.dimmed_opacity
        return {
            "label": f"{series.name} (Your Code)" if highlighted else series.name,
            "data": [{"x": x, "y": y} for x, y in points],
            "borderColor": _hex_to_rgba(series.color, alpha),
            "backgroundColor": _hex_to_rgba(series.color, alpha),
            "borderWidth": 4 if highlighted else 1.5,
            "pointRadius": 0,
            "fill": False,
        }

    def chart_datasets(self) -> List[Dict]:
        """
        Build Chart.js datasets, highlighted series first.

        Returns:
            List of dataset dicts ready for JSON encoding
        """
        highlighted, others = split_highlighted(self.curves, self.result)
        datasets = []
        if highlighted is not None:
            datasets.append(self._dataset(highlighted, highlighted=True))
        datasets.extend(self._dataset(series, highlighted=False) for series in others)
        return datasets

    def generate_html(self, title: str = "Big-O Complexity Chart") -> str:
        """
        Generate HTML for visualization.

        Args:
            title: Chart title

        Returns:
            HTML content as string
        """
        datasets_json = json.dumps(self.chart_datasets(), ensure_ascii=False)
        memory_note = (
            f"Limit: {format_memory(self.memory_limit_bytes)}"
            if self.memory_limit_bytes
            else "Memory usage"
        )
        safe_title = html.escape(title)

        html_template = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{safe_title}</title>
    <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 20px; background: #111827; color: #f3f4f6; }}
        .cards {{ display: flex; gap: 16px; margin-bottom: 24px; }}
        .card {{ flex: 1; padding: 16px; border: 1px solid #374151; border-radius: 8px; }}
        .card .label {{ font-size: 0.85em; color: #9ca3af; }}
        .card .value {{ font-size: 1.6em; font-weight: bold; }}
        .card .note {{ font-size: 0.75em; color: #6b7280; }}
        .chart-container {{ position: relative; height: 400px; }}
    </style>
</head>
<body>
    <h1>{safe_title}</h1>
    <div class="cards">
        <div class="card">
            <div class="label">Complexity</div>
            <div class="value">{html.escape(self.result.complexity)}</div>
            <div class="note">{html.escape(self.result.description)}</div>
        </div>
        <div class="card">
            <div class="label">Runtime</div>
            <div class="value">{format_runtime(self.runtime_ms)}</div>
            <div class="note">Execution time</div>
        </div>
        <div class="card">
            <div class="label">Memory</div>
            <div class="value">{format_memory(self.memory_bytes)}</div>
            <div class="note">{memory_note}</div>
        </div>
    </div>

    <div class="chart-container">
        <canvas id="complexityChart"></canvas>
    </div>
    <p class="note">The highlighted line shows your code's estimated complexity. Lower complexity is better for scalability.</p>

    <script>
        const datasets = {datasets_json};

        document.addEventListener('DOMContentLoaded', function() {{
            const ctx = document.getElementById('complexityChart').getContext('2d');
            new Chart(ctx, {{
                type: 'line',
                data: {{ datasets: datasets }},
                options: {{
                    responsive: true,
                    maintainAspectRatio: false,
                    parsing: false,
                    scales: {{
                        x: {{
                            type: 'linear',
                            title: {{ display: true, text: 'Elements' }}
                        }},
                        y: {{
                            min: 0,
                            max: {self.ceiling},
                            title: {{ display: true, text: 'Operations' }}
                        }}
                    }}
                }}
            }});
        }});
    </script>
</body>
</html>
"""
        return html_template

    def visualize(
        self, output_path: Optional[str] = None, open_browser: bool = True
    ) -> str:
        """
        Write the chart page and optionally open it in the browser.

        Args:
            output_path: Path to save the HTML file (uses a temp file if None)
            open_browser: Whether to open the page after writing it

        Returns:
            Path to the generated HTML file
        """
        html_content = self.generate_html()

        if output_path:
            html_file = output_path
        else:
            fd, html_file = tempfile.mkstemp(suffix=".html", prefix="complexity_viz_")
            os.close(fd)

        with open(html_file, "w", encoding="utf-8") as f:
            f.write(html_content)
        log_file_operation("write", html_file, complexity=self.result.complexity)

        if open_browser:
            try:
                webbrowser.open("file://" + os.path.abspath(html_file))
            except webbrowser.Error as e:
                log_warning(f"Failed to open browser: {e}")

        return html_file
