from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import Field

from .characteristics import ExtractionMetadata
from .common import ParamValue, RecordModel, ResultModel


class Combination(RecordModel):
    """One hyperparameter combination of the grid."""

    config_id: str
    params: Dict[str, ParamValue] = Field(default_factory=dict)


class FitResult(RecordModel):
    config_id: str
    resample_id: str
    status: Literal["ok"] = "ok"

    @property
    def key(self) -> tuple[str, str]:
        return (self.config_id, self.resample_id)


class FitFailure(RecordModel):
    config_id: str
    resample_id: str
    status: Literal["failed"] = "failed"
    error: Optional[str] = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.config_id, self.resample_id)


FitOutcome = Annotated[Union[FitResult, FitFailure], Field(discriminator="status")]


class MetricRecord(RecordModel):
    """One metric estimate for one fit; ``value=None`` when it could not be computed."""

    config_id: str
    resample_id: str
    metric: str
    value: Optional[float] = None


class TuningResult(ResultModel):
    """Everything a resampled grid run produced.

    ``fits`` lists every attempted (combination, resample) pair in engine
    order. Hook output lives in the ``extracts`` side table keyed by the same
    pair, never on the fit records themselves.
    """

    algo: Optional[str] = None
    combinations: List[Combination] = Field(default_factory=list)
    resamples: List[str] = Field(default_factory=list)
    fits: List[FitOutcome] = Field(default_factory=list)
    extracts: List[ExtractionMetadata] = Field(default_factory=list)
    metrics: List[MetricRecord] = Field(default_factory=list)
    metric_names: List[str] = Field(default_factory=list)
    note: Optional[str] = None

    def n_failures(self) -> int:
        return sum(1 for f in self.fits if f.status == "failed")
