import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Pattern, Tuple

from complexity_cli.complexity import ComplexityClass
from complexity_cli.core.constants import DEFAULT_LANGUAGE
from complexity_cli.core.logging import log_debug

# Substrings that mark a line as commented out
COMMENT_MARKERS = ("//", "*")

# Hints that a recursive function halves its input
BINARY_SEARCH_HINTS = ("mid", "left", "right")

# Hints that a single loop divides its input
DIVIDE_HINTS = ("mid", "divide", "split")


@dataclass(frozen=True)
class LanguagePatterns:
    """Loop tokens and recursion regexes for one language."""

    loop_tokens: Tuple[str, ...]
    recursion_patterns: Tuple[Pattern, ...]

    @classmethod
    def build(
        cls, loop_tokens: Iterable[str], recursion_patterns: Iterable[str]
    ) -> "LanguagePatterns":
        """Build patterns from raw strings, compiling regexes case-insensitively."""
        return cls(
            loop_tokens=tuple(loop_tokens),
            recursion_patterns=tuple(
                re.compile(pattern, re.IGNORECASE | re.ASCII)
                for pattern in recursion_patterns
            ),
        )


class LanguagePatternTable:
    """
    Immutable mapping from language id to its LanguagePatterns.

    Lookups never fail: unknown ids resolve to the default language entry.
    """

    def __init__(
        self,
        entries: Mapping[str, LanguagePatterns],
        default_language: str = DEFAULT_LANGUAGE,
    ):
        if default_language not in entries:
            raise ValueError(
                f"Default language '{default_language}' has no pattern entry"
            )
        self._entries = MappingProxyType(dict(entries))
        self.default_language = default_language

    def __contains__(self, language: object) -> bool:
        return language in self._entries

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def languages(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def resolve(self, language: Optional[str]) -> str:
        """Return the language id whose patterns will be used."""
        key = (language or "").strip().lower()
        return key if key in self._entries else self.default_language

    def get(self, language: Optional[str]) -> LanguagePatterns:
        return self._entries[self.resolve(language)]


_LOOP_TOKENS: Dict[str, Tuple[str, ...]] = {
    "javascript": ("for", "while", "foreach", "map", "filter", "reduce", "forEach"),
    "typescript": ("for", "while", "foreach", "map", "filter", "reduce", "forEach"),
    "python": ("for", "while", "in range", "in "),
    "java": ("for", "while", "foreach", "enhanced for"),
    "c": ("for", "while"),
    "cpp": ("for", "while"),
    "csharp": ("for", "while", "foreach"),
    "php": ("for", "while", "foreach"),
}

_RECURSION_PATTERNS: Dict[str, Tuple[str, ...]] = {
    "javascript": (r"function.*\(.*\)\s*\{", r"=>.*=>"),
    "python": (r"def.*\(.*\):",),
    "java": (r"public.*\(.*\)\s*\{", r"private.*\(.*\)\s*\{"),
    "c": (r"\w+\s+\w+\s*\(.*\)\s*\{",),
    "cpp": (r"\w+\s+\w+\s*\(.*\)\s*\{", r"void\s+\w+\s*\(.*\)\s*\{"),
}


def build_default_patterns() -> LanguagePatternTable:
    """Pattern table for every supported language.

    Languages without recursion regexes of their own borrow the javascript ones.
    """
    fallback = _RECURSION_PATTERNS[DEFAULT_LANGUAGE]
    entries = {
        language: LanguagePatterns.build(
            tokens, _RECURSION_PATTERNS.get(language, fallback)
        )
        for language, tokens in _LOOP_TOKENS.items()
    }
    return LanguagePatternTable(entries, default_language=DEFAULT_LANGUAGE)


DEFAULT_PATTERNS = build_default_patterns()


@dataclass(frozen=True)
class ClassificationResult:
    """Estimated complexity of one block of source text."""

    complexity_class: ComplexityClass
    level: float
    description: str

    @classmethod
    def of(cls, complexity_class: ComplexityClass) -> "ClassificationResult":
        return cls(
            complexity_class=complexity_class,
            level=complexity_class.level,
            description=complexity_class.description,
        )

    @property
    def complexity(self) -> str:
        return self.complexity_class.label

    def to_dict(self) -> Dict[str, Any]:
        return {
            "complexity": self.complexity,
            "level": self.level,
            "description": self.description,
        }


@dataclass(frozen=True)
class ScanReport:
    """Signals gathered from the source before classification."""

    language: str
    loop_count: int = 0
    max_nested_loops: int = 0
    has_recursion: bool = False

    @property
    def has_nested_loop(self) -> bool:
        return self.max_nested_loops > 1


class ComplexityClassifier:
    """
    Estimates time complexity from loop and recursion signals.

    This is line-oriented pattern matching, not parsing. Loop tokens are
    plain substrings, so identifiers such as "format" count as loops, and a
    line containing a comment marker anywhere is never counted.
    """

    def __init__(self, patterns: LanguagePatternTable = DEFAULT_PATTERNS):
        self.patterns = patterns

    def scan(self, source_text: Optional[str], language: Optional[str]) -> ScanReport:
        """Collect loop counts, nesting depth and the recursion signal."""
        resolved = self.patterns.resolve(language)
        if not source_text:
            return ScanReport(language=resolved)

        patterns = self.patterns.get(resolved)
        loop_count = 0
        loop_depth = 0
        max_nested_loops = 0
        in_loop = False

        for line in source_text.split("\n"):
            line_lower = line.lower()
            opens_block = line.count("{")
            closes_block = line.count("}")

            if self._starts_loop(line_lower, patterns.loop_tokens):
                loop_count += 1
                loop_depth += 1
                max_nested_loops = max(max_nested_loops, loop_depth)
                in_loop = True

            if closes_block > opens_block and in_loop:
                loop_depth = max(0, loop_depth - 1)
                if loop_depth == 0:
                    in_loop = False

        has_recursion = any(
            pattern.search(source_text) for pattern in patterns.recursion_patterns
        )

        return ScanReport(
            language=resolved,
            loop_count=loop_count,
            max_nested_loops=max_nested_loops,
            has_recursion=has_recursion,
        )

    @staticmethod
    def _starts_loop(line_lower: str, loop_tokens: Tuple[str, ...]) -> bool:
        if any(marker in line_lower for marker in COMMENT_MARKERS):
            return False
        return any(token in line_lower for token in loop_tokens)

    def classify(
        self, source_text: Optional[str], language: Optional[str]
    ) -> ClassificationResult:
        """Estimate the complexity class of source_text written in language."""
        report = self.scan(source_text, language)
        complexity_class = self.decide(report, source_text or "")

        log_debug(
            f"Classified as {complexity_class.label} "
            f"(loops={report.loop_count}, max_nesting={report.max_nested_loops}, "
            f"recursion={report.has_recursion})",
            language=report.language,
        )
        return ClassificationResult.of(complexity_class)

    @staticmethod
    def decide(report: ScanReport, source_text: str) -> ComplexityClass:
        """Map scan signals to a class; the first matching rule wins."""
        text_lower = source_text.lower()
        loops = report.loop_count

        if loops == 0 and not report.has_recursion:
            return ComplexityClass.CONSTANT

        # Nested recursion is not detected; recursion plus nested loops stands in
        if report.has_recursion and report.has_nested_loop:
            return ComplexityClass.EXPONENTIAL

        if report.has_nested_loop and loops >= 2:
            if loops >= 3:
                return ComplexityClass.CUBIC
            return ComplexityClass.QUADRATIC

        if report.has_recursion:
            if all(hint in text_lower for hint in BINARY_SEARCH_HINTS):
                return ComplexityClass.LOGARITHMIC
            return ComplexityClass.LINEAR

        if loops == 1:
            if any(hint in text_lower for hint in DIVIDE_HINTS):
                return ComplexityClass.LOGARITHMIC
            return ComplexityClass.LINEAR

        if loops == 2 and not report.has_nested_loop:
            return ComplexityClass.LINEARITHMIC

        return ComplexityClass.LINEAR


_default_classifier = ComplexityClassifier()


def classify(source_text: Optional[str], language: Optional[str]) -> ClassificationResult:
    """Classify with the default pattern table."""
    return _default_classifier.classify(source_text, language)
