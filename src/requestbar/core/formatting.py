"""Human-readable formatting helpers for collected values."""


def format_duration(seconds: float) -> str:
    """Format a duration for display.

    Args:
        seconds: Duration in seconds.

    Returns:
        Whole milliseconds with an "ms" suffix below one second
        (e.g., "250ms"), otherwise seconds rounded to two decimals
        with an "s" suffix (e.g., "2.5s").
    """
    if seconds < 1:
        return f"{round(seconds * 1000)}ms"
    return f"{round(seconds, 2)}s"
