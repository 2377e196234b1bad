"""The per-fit extraction hook handed to the tuner via ``TuneControl.extract``.

The tuner may call the hook from many workers at once. Every call reads only
its own fitted model and returns a fresh :class:`ExtractionMetadata`; nothing
is cached and no reference to the model survives the call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from tunechar.contracts.results import ExtractionMetadata, FitContext

from ..interfaces import ExtractionHook, HasCharacteristics
from .extractor import clean_characteristics, extract, family_tags

logger = logging.getLogger(__name__)


def _as_context(context: Any) -> FitContext:
    if isinstance(context, FitContext):
        return context
    return FitContext.model_validate(context)


@dataclass(frozen=True)
class CharacteristicsHook(ExtractionHook):
    """Wrap an extractor into a hook returning :class:`ExtractionMetadata`.

    Extractor failures are logged and reported as an empty mapping so one
    misbehaving family never aborts a tuning run.
    """

    extractor: HasCharacteristics = extract

    def __call__(self, fitted_model: Any, context: Any) -> ExtractionMetadata:
        ctx = _as_context(context)
        family = family_tags(fitted_model)[0] or ctx.family
        try:
            characteristics = clean_characteristics(self.extractor(fitted_model))
        except Exception as exc:
            logger.debug(
                "Characteristic extraction failed for %s/%s (family %r): %s",
                ctx.config_id,
                ctx.resample_id,
                family,
                exc,
            )
            characteristics = {}
        return ExtractionMetadata(
            config_id=ctx.config_id,
            resample_id=ctx.resample_id,
            family=family,
            characteristics=characteristics,
        )


extraction_hook = CharacteristicsHook()


def make_extraction_hook(extractor: HasCharacteristics = extract) -> CharacteristicsHook:
    """Return a hook bound to a custom extractor (defaults to :func:`extract`)."""
    return CharacteristicsHook(extractor=extractor)


def as_extraction_metadata(value: Any, context: FitContext) -> ExtractionMetadata | None:
    """Normalise whatever an ``extract`` callback returned into side-table form.

    Accepts :class:`ExtractionMetadata`, a metadata-shaped mapping, or a bare
    ``{name: number}`` mapping. ``None`` means the callback attached nothing.
    """
    if value is None:
        return None
    if isinstance(value, ExtractionMetadata):
        return value
    if isinstance(value, Mapping):
        if "characteristics" in value:
            # The fit being reported on fixes the key, whatever the callback says.
            payload = {
                "family": context.family,
                **dict(value),
                "config_id": context.config_id,
                "resample_id": context.resample_id,
            }
            payload["characteristics"] = clean_characteristics(payload.get("characteristics") or {})
            return ExtractionMetadata.model_validate(payload)
        return ExtractionMetadata(
            config_id=context.config_id,
            resample_id=context.resample_id,
            family=context.family,
            characteristics=clean_characteristics(value),
        )
    logger.debug(
        "Ignoring extract() output of type %s for %s/%s",
        type(value).__name__,
        context.config_id,
        context.resample_id,
    )
    return None
