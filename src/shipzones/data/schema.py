"""Pydantic schema for the damage diagram data tables.

Mirrors the YAML structure in ``shipzones/data/damage_diagram.yaml``. Used by
``load_damage_diagram_data()`` so that a broken table file is rejected at
load time instead of surfacing as odd charts later.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from shipzones.core.types import AttackDirection, ZoneCode

HitDie = Literal[6, 8, 12, 20]


# ---------------------------------------------------------------------------
# Zone configurations
# ---------------------------------------------------------------------------


class ZoneConfigRowSchema(BaseModel):
    zones: list[ZoneCode] = Field(min_length=1)
    hit_die: HitDie

    @model_validator(mode="after")
    def _unique_zones(self) -> ZoneConfigRowSchema:
        if len(set(self.zones)) != len(self.zones):
            raise ValueError(f"duplicate zone codes in {[z.value for z in self.zones]}")
        return self


class SmallCraftTierSchema(ZoneConfigRowSchema):
    max_hull_points: int = Field(gt=0)


class SmallCraftSchema(BaseModel):
    two_zone: SmallCraftTierSchema = Field(alias="2-zone")
    four_zone: SmallCraftTierSchema = Field(alias="4-zone")

    model_config = {"populate_by_name": True}


class ZoneConfigurationsSchema(BaseModel):
    small_craft: SmallCraftSchema = Field(alias="small-craft")
    light: ZoneConfigRowSchema
    medium: ZoneConfigRowSchema
    heavy: ZoneConfigRowSchema
    super_heavy: ZoneConfigRowSchema = Field(alias="super-heavy")

    model_config = {"populate_by_name": True}


# ---------------------------------------------------------------------------
# Zone limits
# ---------------------------------------------------------------------------


class ZoneLimitSchema(BaseModel):
    hull_points: int = Field(ge=0)
    zone_count: int = Field(gt=0)
    zone_limit: int = Field(gt=0)


class ZoneLimitsSchema(BaseModel):
    hulls: dict[str, ZoneLimitSchema] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Hit location tables
# ---------------------------------------------------------------------------


class HitTableEntrySchema(BaseModel):
    """``roll`` is ``[n]`` for a single value or ``[low, ..., high]``."""

    roll: list[int] = Field(min_length=1)
    zone: ZoneCode

    @model_validator(mode="after")
    def _ascending(self) -> HitTableEntrySchema:
        if self.roll[0] < 1 or self.roll[-1] < self.roll[0]:
            raise ValueError(f"invalid roll range {self.roll}")
        return self


class FallbackSchema(BaseModel):
    zone_limit: int = Field(default=100, gt=0)
    zone_count: int = Field(default=6, gt=0)


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class DamageDiagramSchema(BaseModel):
    zone_configurations: ZoneConfigurationsSchema
    zone_limits: ZoneLimitsSchema = Field(default_factory=ZoneLimitsSchema)
    hit_location_tables: dict[str, dict[AttackDirection, list[HitTableEntrySchema]]] = Field(
        default_factory=dict
    )
    fallbacks: FallbackSchema = Field(default_factory=FallbackSchema)

    model_config = {"extra": "allow"}


def validate_damage_diagram_data(data: dict) -> DamageDiagramSchema:
    """Validate a raw table dict (e.g. from OmegaConf).

    Raises ``pydantic.ValidationError`` on invalid tables.
    """
    return DamageDiagramSchema.model_validate(data)
