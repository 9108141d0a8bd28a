"""Formatting helpers for the transfer log lines."""

INSTANTANEOUS = "instantaneous"


def format_file_size(size_bytes: int | float | None) -> str:
    """
    Converts a file size in bytes to a human-readable format.

    Uses powers of 1000 so KB, MB, GB, TB and not 1024 KiB, MiB, GiB, TiB.
    """
    if size_bytes is None:
        return "N/A"
    if size_bytes == 0:
        return "0 B"
    power = 1000
    n = 0
    power_labels = {0: "", 1: "K", 2: "M", 3: "G", 4: "T"}
    while size_bytes >= power and n < len(power_labels) - 1:
        size_bytes /= power
        n += 1
    return f"{size_bytes:.2f} {power_labels[n]}B"


def format_time(elapsed_ms: int) -> str:
    """Converts a duration in milliseconds to e.g. '850 ms', '12.34 s' or '3 min 07 s'."""
    if elapsed_ms < 1000:
        return f"{elapsed_ms} ms"
    if elapsed_ms < 60_000:
        return f"{elapsed_ms / 1000:.2f} s"
    minutes, remainder_ms = divmod(elapsed_ms, 60_000)
    return f"{minutes} min {remainder_ms // 1000:02d} s"


def format_speed(size_bytes: int, elapsed_ms: int) -> str:
    """
    Transfer rate as e.g. '1.50 MB/s'.

    Copies that finish in under a millisecond have no meaningful rate, so they report INSTANTANEOUS.
    """
    if elapsed_ms <= 0:
        return INSTANTANEOUS
    return f"{format_file_size(size_bytes * 1000 / elapsed_ms)}/s"
