"""Configuration and logging setup for fuzzysets."""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .fuzzy.core.mfs import MembershipFunction
from .fuzzy.core.types import FuzzyError
from .fuzzy.model.shapes import build_mf

try:
    import yaml
except ImportError:
    yaml = None

LOGGER_NAME = "fuzzysets"


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Configure and return the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise FuzzyError(f"Unknown log level: {level}")
    logger.setLevel(level)
    return logger


def load_config_file(path: str) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        if path.lower().endswith((".yml", ".yaml")):
            if not yaml:
                raise RuntimeError("PyYAML is missing. Install it: pip install pyyaml")
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    if not isinstance(data, dict):
        raise FuzzyError(f"{path}: top level of the config must be a mapping")
    return data


@dataclass
class DefuzzSection:
    method: str = "centroid"
    mfs: List[str] = field(default_factory=list)  # puste -> wszystkie MF


@dataclass
class SetsSection:
    a: Dict[str, float] = field(default_factory=dict)
    b: Dict[str, float] = field(default_factory=dict)
    ops: List[str] = field(default_factory=list)
    auto_clean: bool = False


def _section(d: Dict[str, Any], key: str) -> Dict[str, Any]:
    sec = d.get(key) or {}
    if not isinstance(sec, dict):
        raise FuzzyError(f"'{key}' must be a mapping, got {type(sec).__name__}")
    return sec


def _memberships(sec: Dict[str, Any], key: str) -> Dict[str, float]:
    out = {}
    for k, v in _section(sec, key).items():
        try:
            out[str(k)] = float(v)
        except (TypeError, ValueError):
            raise FuzzyError(f"sets.{key}.{k}: membership must be a number, got {v!r}") from None
    return out


@dataclass
class RunConfig:
    """
    Sekcje pliku konfiguracyjnego komendy `run`:
      logging: {level}
      mfs:     [{name, shape, params}]
      defuzz:  {method, mfs: [names]}
      sets:    {a: {point: μ}, b: {point: μ}, ops: [...], auto_clean}
    """
    log_level: str = "WARNING"
    mfs: Dict[str, MembershipFunction] = field(default_factory=dict)
    defuzz: Optional[DefuzzSection] = None
    sets: Optional[SetsSection] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> RunConfig:
        cfg = cls()
        cfg.log_level = str(_section(d, "logging").get("level", cfg.log_level))

        for i, item in enumerate(d.get("mfs") or []):
            if not isinstance(item, dict):
                raise FuzzyError(f"mfs[{i}]: expected a mapping with name/shape/params, got {item!r}")
            name = item.get("name") or f"mf{i + 1}"
            if name in cfg.mfs:
                raise FuzzyError(f"Duplicate MF name in config: {name}")
            if "shape" not in item:
                raise FuzzyError(f"MF '{name}': missing 'shape'")
            cfg.mfs[name] = build_mf(item["shape"], item.get("params") or [])

        if "defuzz" in d:
            sec = _section(d, "defuzz")
            cfg.defuzz = DefuzzSection(method=sec.get("method", "centroid"),
                                       mfs=list(sec.get("mfs") or []))
            for name in cfg.defuzz.mfs:
                if name not in cfg.mfs:
                    raise FuzzyError(f"defuzz: unknown MF '{name}'")

        if "sets" in d:
            sec = _section(d, "sets")
            cfg.sets = SetsSection(
                a=_memberships(sec, "a"),
                b=_memberships(sec, "b"),
                ops=list(sec.get("ops") or []),
                auto_clean=bool(sec.get("auto_clean", False)),
            )
        return cfg

    @classmethod
    def load(cls, path: str) -> RunConfig:
        return cls.from_dict(load_config_file(path))
