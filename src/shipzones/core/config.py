"""Application settings for the shipzones CLI, read with OmegaConf."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf

LOCAL_OVERRIDE_NAME = "local.yaml"


class ShipZonesConfig:
    """Settings file plus an optional machine-local override.

    ``config/default.yaml`` is versioned; a ``local.yaml`` beside it (for
    example pointing ``shipzones.data.path`` at homebrew tables) is merged
    over it when present. Command line flags are applied afterwards with
    :meth:`override`.
    """

    def __init__(self, config_path: str | Path = "config/default.yaml"):
        self._config_path = Path(config_path)
        self._config: DictConfig | None = None

    def _merge_local(self, base: DictConfig) -> DictConfig:
        local = self._config_path.with_name(LOCAL_OVERRIDE_NAME)
        if local == self._config_path or not local.is_file():
            return base
        merged = OmegaConf.merge(base, OmegaConf.load(local))
        assert isinstance(merged, DictConfig)
        return merged

    def load(self, validate: bool = False) -> DictConfig:
        """Read the settings file.

        Schema validation runs when ``validate`` is passed or the file sets
        ``shipzones.system.validate_config``; bad values then raise
        ``pydantic.ValidationError``. A missing file raises
        ``FileNotFoundError``.
        """
        if not self._config_path.exists():
            raise FileNotFoundError(f"Config not found: {self._config_path}")

        loaded = OmegaConf.load(self._config_path)
        assert isinstance(loaded, DictConfig)
        cfg = self._merge_local(loaded)

        if validate or OmegaConf.select(cfg, "shipzones.system.validate_config", default=False):
            from shipzones.core.config_schema import validate_config

            validate_config(OmegaConf.to_container(cfg, resolve=True))

        self._config = cfg
        return cfg

    def override(self, dotpath: str, value: Any) -> None:
        """Set one value, e.g. ``override("shipzones.chart.directions", ["aft"])``."""
        if self._config is None:
            raise RuntimeError("Config not loaded yet. Call load() first.")
        OmegaConf.update(self._config, dotpath, value)

    @property
    def cfg(self) -> DictConfig:
        if self._config is None:
            raise RuntimeError("Config not loaded yet. Call load() first.")
        return self._config
