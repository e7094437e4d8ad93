from __future__ import annotations

_UNITS = ["B", "KB", "MB", "GB", "TB", "PB", "EB"]


def size_string(num_bytes: int) -> str:
    """
    Human readable byte count using binary multiples.

    size_string(512) == "512 B"
    size_string(1536) == "1.50 KB"
    """
    if num_bytes < 1024:
        return f"{num_bytes} B"

    value = float(num_bytes)
    for unit in _UNITS[1:]:
        value /= 1024
        if value < 1024 or unit == _UNITS[-1]:
            return f"{value:.2f} {unit}"

    return f"{value:.2f} {_UNITS[-1]}"
