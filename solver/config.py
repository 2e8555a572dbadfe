from __future__ import annotations
import copy
from pathlib import Path
from typing import Any, Dict
import yaml

DEFAULTS: Dict[str, Any] = {
    "web_timeout": 20.0,  # seconds, whole request
    "web_host_rewrite": ["www", "show"],  # puzzle table is served from the framed host
    "log_level": "WARNING",
}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def load_config(path: str | Path | None = None, **overrides) -> DotDict:
    """Defaults, then the YAML file (if any), then non-None overrides."""
    cfg = DotDict(copy.deepcopy(DEFAULTS))
    if path:
        cfg.update(load_yaml(path))
    merge_overrides(cfg, **overrides)
    return cfg
