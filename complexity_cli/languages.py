from pathlib import Path
from typing import Optional

from complexity_cli.core import constants
from complexity_cli.core.exceptions import ConfigurationError
from complexity_cli.core.logging import log_warning


def resolve_language(lang: str, strict: bool = False) -> str:
    """Resolve a language name or alias to its canonical id.

    Unknown names fall back to the default language unless strict is set.
    """
    lowered = lang.strip().lower()

    if lowered in constants.SUPPORTED_LANGUAGES:
        return lowered

    resolved = constants.LANGUAGE_ALIASES.get(lowered)
    if resolved:
        return resolved

    supported = ", ".join(constants.SUPPORTED_LANGUAGES)
    aliases = ", ".join(sorted(constants.LANGUAGE_ALIASES))
    if strict:
        raise ConfigurationError(
            f"Unsupported language: '{lang}'. "
            f"Supported languages: {supported}. "
            f"Aliases: {aliases}"
        )

    log_warning(
        f"Unsupported language '{lang}', using {constants.DEFAULT_LANGUAGE} patterns"
    )
    return constants.DEFAULT_LANGUAGE


def language_from_path(path: Optional[str]) -> Optional[str]:
    """Infer the language from a file extension, or None if unknown."""
    if not path:
        return None
    return constants.LANGUAGE_EXTENSIONS.get(Path(path).suffix.lower())
