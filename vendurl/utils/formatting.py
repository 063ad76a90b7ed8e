"""
Helper functions for formatting data into human-readable strings.
"""


def format_size(bytes_size: int) -> str:
    """Formats bytes into a human-readable size string (e.g., '145.3 KB')."""
    if bytes_size <= 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB"]
    size = float(bytes_size)
    i = 0
    while size >= 1024 and i < len(units) - 1:
        size /= 1024
        i += 1
    if i == 0:
        return f"{bytes_size} B"
    return f"{size:.1f} {units[i]}"


def format_duration(seconds: float) -> str:
    """Formats a duration in seconds (e.g., '1m 12s' or '0.4s')."""
    if seconds < 10:
        return f"{seconds:.1f}s"
    s = int(seconds)
    minutes, secs = divmod(s, 60)
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
