"""
Autocompletion functions for Complexity CLI.
"""

from typing import List

from complexity_cli.complexity import ComplexityClass
from complexity_cli.core.constants import LANGUAGE_ALIASES, SUPPORTED_LANGUAGES


class Completions:
    """Autocompletion provider for Complexity CLI."""

    @staticmethod
    def languages(incomplete: str) -> List[str]:
        """Complete language names and aliases."""
        names = sorted(set(SUPPORTED_LANGUAGES) | set(LANGUAGE_ALIASES))
        return [name for name in names if name.startswith(incomplete.lower())]

    @staticmethod
    def complexities(incomplete: str) -> List[str]:
        """Complete complexity class labels."""
        return [
            member.label
            for member in ComplexityClass
            if member.label.lower().startswith(incomplete.lower())
        ]
