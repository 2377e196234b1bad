"""Column layouts of the long-form tables."""

from __future__ import annotations

from typing import Dict, Iterable

CONFIG_ID = "config_id"
RESAMPLE_ID = "resample_id"

CHARACTERISTIC_COLUMNS = [CONFIG_ID, RESAMPLE_ID, "characteristic", "value"]
METRIC_COLUMNS = [CONFIG_ID, RESAMPLE_ID, "metric", "value"]

# Wide tables keep characteristic names as-is; incoming columns that collide
# with an existing column are renamed with these patterns.
PARAM_COLUMN = "param_{}"
METRIC_COLUMN = "{}_metric"

# Key under DataFrame.attrs listing the characteristic columns of a wide table.
CHARACTERISTICS_ATTR = "characteristics"


def column_renames(incoming: Iterable[str], existing: Iterable[str], pattern: str) -> Dict[str, str]:
    """Rename map for ``incoming`` columns that collide with ``existing`` ones."""
    incoming = list(incoming)
    existing = set(existing)
    used = existing | set(incoming)
    renames: Dict[str, str] = {}
    for name in incoming:
        if name not in existing:
            continue
        new = pattern.format(name)
        while new in used:
            new = pattern.format(new)
        renames[name] = new
        used.add(new)
    return renames
