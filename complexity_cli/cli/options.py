"""
Resolved options and configuration handling for Complexity CLI.
"""

from dataclasses import dataclass
from typing import Optional

from complexity_cli.core.config import AnalyzerConfig, load_config_file
from complexity_cli.core.logging import configure_logging, log_debug, log_info
from complexity_cli.languages import resolve_language


@dataclass
class ResolvedOptions:
    """Container for resolved CLI options."""

    language: Optional[str]
    debug: bool
    config: AnalyzerConfig


def resolve_options(
    language_override: Optional[str] = None,
    config_override: Optional[str] = None,
    debug_override: bool = False,
    verbose_override: bool = False,
    log_file: Optional[str] = None,
) -> ResolvedOptions:
    """Resolves options based on command args, config files, and defaults."""
    configure_logging(debug=debug_override, verbose=verbose_override, log_file=log_file)

    log_debug(f"Loading config file: {config_override or 'default locations'}")
    config_data = load_config_file(config_override)
    config = AnalyzerConfig.from_dict(config_data)

    if debug_override:
        config.debug = True

    # An explicit flag wins over the configured default; a file extension
    # is only consulted later when neither is present
    language = None
    if language_override:
        log_debug(f"Resolving language from override: {language_override}")
        language = resolve_language(language_override)
    elif config.default_language:
        log_debug(f"Using language from config: {config.default_language}")
        language = resolve_language(config.default_language)

    resolved = ResolvedOptions(language=language, debug=config.debug, config=config)
    log_info("Options resolved", language=resolved.language)
    return resolved
