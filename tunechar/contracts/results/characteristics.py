from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field

from .common import RecordModel


class FitContext(RecordModel):
    """Identifies the fit a hook invocation belongs to."""

    config_id: str
    resample_id: str
    family: Optional[str] = None


class ExtractionMetadata(RecordModel):
    """What the extraction hook hands back to the tuner for one fit.

    ``characteristics`` may be empty: the model family had nothing to report,
    or its extractor failed. Either way the fit contributes zero rows.
    """

    config_id: str
    resample_id: str
    family: Optional[str] = None
    characteristics: Dict[str, float] = Field(default_factory=dict)

    @property
    def key(self) -> tuple[str, str]:
        return (self.config_id, self.resample_id)
