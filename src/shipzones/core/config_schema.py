"""Pydantic schema for shipzones configuration validation.

Mirrors the YAML structure in config/default.yaml. Used when
``validate=True`` is passed to ``ShipZonesConfig.load()``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from shipzones.core.types import CARDINAL_DIRECTIONS, AttackDirection


class SystemConfig(BaseModel):
    name: str = "SHIPZONES"
    version: str = "0.1.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    validate_config: bool = False
    log_file: str | None = None
    log_json: bool = False


class DataConfig(BaseModel):
    # None loads the tables bundled with the package
    path: str | None = None


class ChartConfig(BaseModel):
    directions: list[AttackDirection] = Field(
        default_factory=lambda: list(CARDINAL_DIRECTIONS),
        min_length=1,
    )


class ShipZonesRootConfig(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)

    model_config = {"extra": "allow"}


class ShipZonesConfigSchema(BaseModel):
    """Top-level wrapper matching YAML root key ``shipzones:``."""

    shipzones: ShipZonesRootConfig

    model_config = {"extra": "allow"}


def validate_config(cfg_dict: dict) -> ShipZonesConfigSchema:
    """Validate a raw config dict (e.g. from OmegaConf) against the schema.

    Raises ``pydantic.ValidationError`` on invalid config.
    """
    return ShipZonesConfigSchema.model_validate(cfg_dict)
