"""
Load projection parameters from a JSON scenario file.

Files are strict: unknown keys and out-of-range values are rejected with a
pydantic ValidationError rather than coerced (coercion is for interactive input,
see data_prep.validators).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from core.config import ProjectionParameters, TierCounts

logger = logging.getLogger(__name__)

_DEFAULTS = ProjectionParameters()


class TierCountsModel(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    basic: int = Field(0, ge=0)
    pro: int = Field(0, ge=0)
    premium: int = Field(0, ge=0)


class ParameterFile(BaseModel):
    """Schema of a scenario file. Omitted keys take the dashboard defaults."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    projection_months: int = Field(_DEFAULTS.projection_months, ge=1)
    ong_growth_rate: float = Field(_DEFAULTS.ong_growth_rate, gt=-100.0)
    corporate_growth_rate: float = Field(_DEFAULTS.corporate_growth_rate, gt=-100.0)
    store_growth_rate: float = Field(_DEFAULTS.store_growth_rate, gt=-100.0)
    initial_ong_clients: TierCountsModel = Field(
        default_factory=lambda: TierCountsModel(**_DEFAULTS.initial_ong_clients.as_dict())
    )
    initial_corporate_clients: TierCountsModel = Field(
        default_factory=lambda: TierCountsModel(**_DEFAULTS.initial_corporate_clients.as_dict())
    )
    initial_store_revenue: float = Field(_DEFAULTS.initial_store_revenue, ge=0.0)
    fixed_monthly_cost: float = Field(_DEFAULTS.fixed_monthly_cost, ge=0.0)
    variable_cost_percent: float = Field(_DEFAULTS.variable_cost_percent, ge=0.0)

    def to_parameters(self) -> ProjectionParameters:
        data = self.model_dump()
        data["initial_ong_clients"] = TierCounts(**data["initial_ong_clients"])
        data["initial_corporate_clients"] = TierCounts(**data["initial_corporate_clients"])
        return ProjectionParameters(**data)


def parameters_from_mapping(data: Mapping[str, Any]) -> ProjectionParameters:
    return ParameterFile.model_validate(dict(data)).to_parameters()


def load_parameters(path: Union[str, Path]) -> ProjectionParameters:
    """
    Read and validate a JSON scenario file.
    Raises OSError, json.JSONDecodeError or pydantic.ValidationError.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at top level, got {type(data).__name__}")
    params = parameters_from_mapping(data)
    logger.info("Loaded parameters from %s (%d months)", path, params.projection_months)
    return params


def dump_parameters(params: ProjectionParameters, path: Union[str, Path]) -> None:
    """Write parameters in the same JSON layout load_parameters() reads."""
    path = Path(path)
    path.write_text(json.dumps(params.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
