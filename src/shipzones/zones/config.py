"""Damage diagram engine configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from omegaconf import OmegaConf

from shipzones.core.types import CARDINAL_DIRECTIONS, AttackDirection
from shipzones.data.tables import DamageDiagramData, load_damage_diagram_data

logger = logging.getLogger(__name__)


@dataclass
class DiagramConfig:
    """Where the tables come from and which chart columns to build."""

    # None uses the packaged tables
    data_path: str | None = None
    directions: list[AttackDirection] = field(default_factory=lambda: list(CARDINAL_DIRECTIONS))

    @classmethod
    def from_omegaconf(cls, cfg: Any) -> DiagramConfig:
        """Build from the ``shipzones`` OmegaConf node or a plain dict."""
        if cfg is None:
            return cls()

        if OmegaConf.is_config(cfg):
            cfg = OmegaConf.to_container(cfg, resolve=True)

        if not isinstance(cfg, dict):
            cfg = dict(cfg)

        data = cfg.get("data", {}) or {}
        chart = cfg.get("chart", {}) or {}

        directions: list[AttackDirection] = []
        for raw in chart.get("directions") or []:
            try:
                directions.append(AttackDirection(raw))
            except ValueError:
                logger.warning("Unknown attack direction '%s', skipping", raw)
        if not directions:
            directions = list(CARDINAL_DIRECTIONS)

        return cls(data_path=data.get("path"), directions=directions)

    def load_data(self) -> DamageDiagramData:
        return load_damage_diagram_data(self.data_path)
