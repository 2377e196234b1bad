from __future__ import annotations


def format_ids(prefix: str, n: int) -> list[str]:
    """``prefix01 .. prefixNN`` zero-padded to the width of ``n`` (at least 2 digits).

    Zero padding keeps lexicographic and engine order identical.
    """
    width = max(2, len(str(n)))
    return [f"{prefix}{i:0{width}d}" for i in range(1, n + 1)]
