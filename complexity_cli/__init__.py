from complexity_cli.analyzer import (
    ClassificationResult,
    ComplexityClassifier,
    LanguagePatterns,
    LanguagePatternTable,
    classify,
)
from complexity_cli.complexity import ComplexityClass
from complexity_cli.curves import CurveSeries, find_series, generate_curves
from complexity_cli.visualization import ComplexityVisualizer


__all__ = [
    "ClassificationResult",
    "ComplexityClass",
    "ComplexityClassifier",
    "ComplexityVisualizer",
    "CurveSeries",
    "LanguagePatternTable",
    "LanguagePatterns",
    "classify",
    "find_series",
    "generate_curves",
]
