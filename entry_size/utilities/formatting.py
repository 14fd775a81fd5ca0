"""Human-readable formatting helpers."""

_UNITS = ["B", "KB", "MB", "GB"]


def format_bytes(size: int) -> str:
    """
    Format a byte count with binary (1024) units and two decimals.

    Args:
        size: Size in bytes

    Returns:
        String such as "0.00 B", "1.50 KB" or "2.00 MB"
    """
    if size <= 0:
        return "0.00 B"

    exponent = 0
    while size >= 1024 ** (exponent + 1) and exponent < len(_UNITS) - 1:
        exponent += 1

    return f"{size / 1024 ** exponent:.2f} {_UNITS[exponent]}"


def truncate(text: str, length: int) -> str:
    """Shorten text to length characters, marking the cut with an ellipsis."""
    if len(text) <= length:
        return text
    return text[:length] + "..."
