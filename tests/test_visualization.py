import os
import webbrowser

from complexity_cli.analyzer import ClassificationResult
from complexity_cli.complexity import ComplexityClass
from complexity_cli.curves import generate_curves
from complexity_cli.visualization import ComplexityVisualizer, _hex_to_rgba


def make_visualizer(**kwargs):
    result = ClassificationResult.of(ComplexityClass.QUADRATIC)
    return ComplexityVisualizer(result, generate_curves(101), **kwargs)


def test_hex_to_rgba():
    assert _hex_to_rgba("#00ff00", 0.6) == "rgba(0, 255, 0, 0.6)"
    assert _hex_to_rgba("aa5500", 1.0) == "rgba(170, 85, 0, 1.0)"


def test_highlighted_dataset_comes_first():
    datasets = make_visualizer().chart_datasets()
    assert len(datasets) == len(ComplexityClass)
    assert datasets[0]["label"] == "O(n²) (Your Code)"
    assert datasets[0]["borderWidth"] == 4
    assert datasets[0]["borderColor"].endswith(", 1.0)")
    for dataset in datasets[1:]:
        assert "(Your Code)" not in dataset["label"]
        assert dataset["borderColor"].endswith(", 0.6)")


def test_datasets_are_clamped_and_sampled():
    datasets = make_visualizer(sample_step=2).chart_datasets()
    for dataset in datasets:
        assert len(dataset["data"]) == 51
        assert all(point["y"] <= 1000 for point in dataset["data"])


def test_generate_html_shows_metrics():
    page = make_visualizer(
        runtime_ms=12.5, memory_bytes=2048, memory_limit_bytes=128 * 1024 * 1024
    ).generate_html(title="Chart <demo>")
    assert "Quadratic Time" in page
    assert "12.50 ms" in page
    assert "2.00 KB" in page
    assert "Limit: 128.00 MB" in page
    assert "Chart &lt;demo&gt;" in page
    assert "O(n²) (Your Code)" in page


def test_generate_html_keeps_superscripts_literal():
    page = make_visualizer().generate_html()
    assert '"label": "O(n³)"' in page
    assert "\\u00b3" not in page


def test_generate_html_without_metrics():
    page = make_visualizer().generate_html()
    assert page.count("N/A") == 2
    assert "Memory usage" in page


def test_visualize_writes_file(tmp_path):
    output = tmp_path / "chart.html"
    path = make_visualizer().visualize(str(output), open_browser=False)
    assert path == str(output)
    assert "complexityChart" in output.read_text(encoding="utf-8")


def test_visualize_opens_browser(tmp_path, monkeypatch):
    opened = []
    monkeypatch.setattr(webbrowser, "open", lambda url: opened.append(url))
    output = tmp_path / "chart.html"
    make_visualizer().visualize(str(output), open_browser=True)
    assert opened == ["file://" + os.path.abspath(str(output))]
