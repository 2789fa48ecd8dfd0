from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from omegaconf import DictConfig, OmegaConf

from .models import Settings

CONFIG_ENV_VAR = "SANDBOX_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config/config.yaml"


def resolve_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


@lru_cache(maxsize=4)
def _load_config_file(path: Path) -> DictConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config not found at {path}")
    return OmegaConf.load(path)


def make_runtime_config(overrides: Optional[Dict[str, Any]] = None, path: Optional[Path] = None) -> DictConfig:
    base_container = OmegaConf.to_container(_load_config_file(path or resolve_config_path()), resolve=False)
    base = OmegaConf.create(base_container)
    OmegaConf.set_struct(base, True)

    merged = DictConfig(OmegaConf.merge(base, OmegaConf.create(overrides or {})))
    return merged


def load_settings(overrides: Optional[Dict[str, Any]] = None, path: Optional[Path] = None) -> Settings:
    """Build validated settings from the YAML config plus optional overrides.

    Unknown override keys raise ``omegaconf.errors.ConfigKeyError`` because the
    base config is in struct mode. Environment interpolations are resolved here.
    """
    config = make_runtime_config(overrides, path)
    container = OmegaConf.to_container(config, resolve=True, enum_to_str=True)
    return Settings.model_validate(container)
