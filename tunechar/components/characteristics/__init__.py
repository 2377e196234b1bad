"""Characteristic extraction, collection, metric join and reshaping.

Extractor -> Hook (per fit, inside the tuner) -> Collector -> Joiner -> Reshaper.
"""

from .collector import collect, combinations_frame, read_tuning_result
from .extractor import FittedModel, extract
from .hook import CharacteristicsHook, extraction_hook, make_extraction_hook
from .joiner import average_metrics, collect_metrics, join
from .reshaper import melt_long, pivot_wide
from .tables import CHARACTERISTIC_COLUMNS, METRIC_COLUMNS

__all__ = [
    "FittedModel",
    "extract",
    "CharacteristicsHook",
    "extraction_hook",
    "make_extraction_hook",
    "collect",
    "combinations_frame",
    "read_tuning_result",
    "collect_metrics",
    "average_metrics",
    "join",
    "pivot_wide",
    "melt_long",
    "CHARACTERISTIC_COLUMNS",
    "METRIC_COLUMNS",
]
