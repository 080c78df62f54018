"""
Constants used throughout the application.
"""

# File names
CONFIG_FILENAME = "complexity_cli_config.json"
CHART_FILENAME = "complexity_chart.html"

# Language configuration
DEFAULT_LANGUAGE = "javascript"
SUPPORTED_LANGUAGES = (
    "javascript",
    "typescript",
    "python",
    "java",
    "c",
    "cpp",
    "csharp",
    "php",
)
LANGUAGE_ALIASES = {
    "js": "javascript",
    "node": "javascript",
    "ts": "typescript",
    "py": "python",
    "c++": "cpp",
    "cxx": "cpp",
    "c#": "csharp",
    "cs": "csharp",
}
LANGUAGE_EXTENSIONS = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".py": "python",
    ".java": "java",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".cxx": "cpp",
    ".hpp": "cpp",
    ".cs": "csharp",
    ".php": "php",
}

# Chart configuration
DEFAULT_DOMAIN_SIZE = 101
VALUE_CEILING = 1000
DEFAULT_SAMPLE_STEP = 2
DIMMED_OPACITY = 0.6

# Execution metrics
DEFAULT_MEMORY_LIMIT_BYTES = 128 * 1024 * 1024
ESTIMATED_BYTES_PER_OUTPUT_CHAR = 100
