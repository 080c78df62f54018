import pytest

from complexity_cli.core.exceptions import ConfigurationError
from complexity_cli.languages import language_from_path, resolve_language


@pytest.mark.parametrize(
    "name, expected",
    [
        ("python", "python"),
        ("PY", "python"),
        ("js", "javascript"),
        ("c++", "cpp"),
        ("C#", "csharp"),
        ("ts", "typescript"),
    ],
)
def test_resolve_language(name, expected):
    assert resolve_language(name) == expected


def test_resolve_unknown_language_falls_back():
    assert resolve_language("cobol") == "javascript"


def test_resolve_unknown_language_strict():
    with pytest.raises(ConfigurationError):
        resolve_language("cobol", strict=True)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("solution.py", "python"),
        ("src/Main.java", "java"),
        ("lib/sort.HPP", "cpp"),
        ("index.tsx", "typescript"),
        ("notes.txt", None),
        ("Makefile", None),
        (None, None),
    ],
)
def test_language_from_path(path, expected):
    assert language_from_path(path) == expected
