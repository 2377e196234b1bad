"""Result contracts for the characteristics layer.

Design goals:
- JSON-friendly field types (lists, dicts, scalars) at the contract boundary.
- Strict top-level validation (extra fields forbidden) to prevent silent drift.
- Records are frozen once created.

Note: contracts should only depend on stdlib + pydantic.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict

ParamValue = Union[int, float, str, bool, None]


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")


class RecordModel(BaseModel):
    """Immutable record keyed by (config_id, resample_id)."""

    model_config = ConfigDict(extra="forbid", frozen=True)
