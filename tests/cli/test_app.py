import json

from typer.testing import CliRunner

from complexity_cli.cli.app import app
from complexity_cli.cli.handlers import CommandHandlers

runner = CliRunner()

NESTED_JS = """for (let i = 0; i < n; i++) {
  for (let j = 0; j < n; j++) {
    total += i + j;
  }
}
"""

BINARY_SEARCH_PY = """def search(items, target, left, right):
    if left > right:
        return -1
    mid = (left + right) // 2
    if items[mid] < target:
        return search(items, target, mid + 1, right)
    return search(items, target, left, mid - 1)
"""


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_analyze_report(tmp_path):
    path = write(tmp_path, "nested.js", NESTED_JS)
    result = runner.invoke(app, ["analyze", path])
    assert result.exit_code == 0
    assert "O(n²)" in result.output
    assert "Quadratic Time" in result.output


def test_analyze_json(tmp_path):
    path = write(tmp_path, "nested.js", NESTED_JS)
    result = runner.invoke(app, ["analyze", path, "--json", "--detailed"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["complexity"] == "O(n²)"
    assert payload["level"] == 4
    assert payload["language"] == "javascript"
    assert payload["loop_count"] == 2
    assert payload["max_nested_loops"] == 2
    assert payload["has_recursion"] is False


def test_analyze_infers_language_from_extension(tmp_path):
    path = write(tmp_path, "search.py", BINARY_SEARCH_PY)
    result = runner.invoke(app, ["analyze", path, "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["language"] == "python"
    assert payload["complexity"] == "O(log n)"


def test_analyze_reads_stdin():
    result = runner.invoke(
        app,
        ["analyze", "-", "--language", "py", "--json"],
        input="def walk(node):\n    return walk(node.next)\n",
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["complexity"] == "O(n)"


def test_analyze_with_metrics(tmp_path):
    path = write(tmp_path, "nested.js", NESTED_JS)
    result = runner.invoke(
        app, ["analyze", path, "--runtime", "12.5", "--memory", "2048"]
    )
    assert result.exit_code == 0
    assert "12.50 ms" in result.output
    assert "2.00 KB" in result.output


def test_analyze_estimates_memory_from_output(tmp_path):
    path = write(tmp_path, "nested.js", NESTED_JS)
    output_file = write(tmp_path, "out.txt", "x" * 20)
    result = runner.invoke(
        app, ["analyze", path, "--json", "--output-file", output_file]
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["memory_bytes"] == 2000


def test_analyze_estimates_memory_when_reported_zero(tmp_path):
    path = write(tmp_path, "nested.js", NESTED_JS)
    output_file = write(tmp_path, "out.txt", "x" * 20)
    result = runner.invoke(
        app,
        ["analyze", path, "--json", "--memory", "0", "--output-file", output_file],
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["memory_bytes"] == 2000


def test_analyze_memory_limit_flag(tmp_path):
    path = write(tmp_path, "nested.js", NESTED_JS)
    result = runner.invoke(
        app, ["analyze", path, "--memory", "10", "--memory-limit", "1024"]
    )
    assert result.exit_code == 0
    assert "Limit: 1.00 KB" in result.output


def test_analyze_rejects_negative_memory_limit(tmp_path):
    path = write(tmp_path, "nested.js", NESTED_JS)
    result = runner.invoke(
        app, ["analyze", path, "--memory", "10", "--memory-limit=-1"]
    )
    assert result.exit_code == 1


def test_analyze_scans_source_once(tmp_path, monkeypatch):
    calls = []
    original_scan = CommandHandlers.classifier.scan

    def counting_scan(source_text, language):
        calls.append(language)
        return original_scan(source_text, language)

    monkeypatch.setattr(CommandHandlers.classifier, "scan", counting_scan)
    path = write(tmp_path, "nested.js", NESTED_JS)
    result = runner.invoke(app, ["analyze", path, "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["complexity"] == "O(n²)"
    assert calls == ["javascript"]


def test_analyze_path_with_brackets(tmp_path):
    # Resolves to a path containing "dir[/x]"
    folder = tmp_path / "dir[" / "x]"
    folder.mkdir(parents=True)
    path = write(folder, "a.js", NESTED_JS)
    result = runner.invoke(app, ["analyze", path])
    assert result.exit_code == 0
    assert "O(n²)" in result.output


def test_analyze_missing_file_with_brackets(tmp_path):
    result = runner.invoke(app, ["analyze", str(tmp_path / "[/red]missing.js")])
    assert result.exit_code == 1
    assert "Source file not found" in result.output


def test_analyze_uses_config_language(tmp_path):
    (tmp_path / "complexity_cli_config.json").write_text(
        json.dumps({"language": "python"})
    )
    path = write(tmp_path, "snippet.txt", BINARY_SEARCH_PY)
    result = runner.invoke(app, ["analyze", path, "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["language"] == "python"


def test_analyze_missing_file(tmp_path):
    result = runner.invoke(app, ["analyze", str(tmp_path / "missing.js")])
    assert result.exit_code == 1
    assert "Source file not found" in result.output


def test_analyze_rejects_negative_runtime(tmp_path):
    path = write(tmp_path, "nested.js", NESTED_JS)
    result = runner.invoke(app, ["analyze", path, "--runtime=-1"])
    assert result.exit_code == 1


def test_curves():
    result = runner.invoke(app, ["curves", "--highlight", "O(n log n)", "--step", "50"])
    assert result.exit_code == 0
    assert "Reference Growth Curves" in result.output


def test_curves_unknown_highlight():
    result = runner.invoke(app, ["curves", "--highlight", "O(n^4)"])
    assert result.exit_code == 1


def test_curves_rejects_empty_domain():
    result = runner.invoke(app, ["curves", "--domain-size", "0"])
    assert result.exit_code == 1


def test_visualize(tmp_path):
    path = write(tmp_path, "nested.js", NESTED_JS)
    output = tmp_path / "chart.html"
    result = runner.invoke(
        app, ["visualize", path, "--output", str(output), "--no-open"]
    )
    assert result.exit_code == 0
    page = output.read_text(encoding="utf-8")
    assert "Quadratic Time" in page
    assert "O(n²) (Your Code)" in page
    assert "\\u00b2" not in page


def test_visualize_memory_limit_flag(tmp_path):
    path = write(tmp_path, "nested.js", NESTED_JS)
    output = tmp_path / "chart.html"
    result = runner.invoke(
        app,
        [
            "visualize",
            path,
            "--output",
            str(output),
            "--no-open",
            "--memory",
            "10",
            "--memory-limit",
            "1024",
        ],
    )
    assert result.exit_code == 0
    assert "Limit: 1.00 KB" in output.read_text(encoding="utf-8")


def test_visualize_uses_configured_output_dir(tmp_path):
    (tmp_path / "complexity_cli_config.json").write_text(
        json.dumps({"output_dir": str(tmp_path / "charts"), "open_browser": False})
    )
    path = write(tmp_path, "nested.js", NESTED_JS)
    result = runner.invoke(app, ["visualize", path])
    assert result.exit_code == 0
    assert (tmp_path / "charts" / "complexity_chart.html").exists()


def test_languages():
    result = runner.invoke(app, ["languages"])
    assert result.exit_code == 0
    assert "typescript" in result.output
