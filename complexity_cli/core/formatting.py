from typing import Optional, Union


def format_runtime(milliseconds: Optional[float]) -> str:
    """
    Format an observed runtime given in milliseconds:
    - missing or 0: N/A
    - <1ms: μs
    - <1s: ms
    - >=1s: s
    Args:
        milliseconds: Runtime in milliseconds
    Returns:
        Formatted time string with unit
    """
    if not milliseconds:
        return "N/A"
    if milliseconds < 1:
        return f"{milliseconds * 1000:.2f} μs"
    elif milliseconds < 1000:
        return f"{milliseconds:.2f} ms"
    else:
        return f"{milliseconds / 1000:.2f} s"


def format_memory(bytes_value: Optional[Union[int, float]]) -> str:
    """
    Format memory size in appropriate units.
    Args:
        bytes_value: Memory size in bytes
    Returns:
        Formatted memory string with unit, or N/A when missing or 0
    """
    if not bytes_value:
        return "N/A"
    if bytes_value < 1024:
        return f"{int(bytes_value)} B"
    if bytes_value < 1024 * 1024:
        return f"{bytes_value / 1024:.2f} KB"
    return f"{bytes_value / (1024 * 1024):.2f} MB"


def format_level(level: float) -> str:
    """Format an ordinal level without a trailing .0 for whole numbers."""
    return str(int(level)) if float(level).is_integer() else str(level)
