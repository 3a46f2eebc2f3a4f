"""Configuration of the demonstration run (YAML or JSON file).

Example ``config.yaml``::

    n: 6
    level: 5          # omit or null to report every level
    values: [a, b, c, d, e, f]
    log_level: INFO
    csv: results/permutations.csv
    charts:
      dir: charts
      plot: true
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

import yaml


@dataclass(frozen=True)
class DemoConfig:
    """Parameters of one demonstration run.

    Attributes:
        n: Number of elements to permute.
        level: Number of swaps per sequence; None reports every level.
        values: Collection to permute; defaults to ``list(range(n))``.
        log_level: Name of the logging level.
        charts_dir: Directory for the per-level count chart.
        csv_path: Optional CSV file receiving every executed sequence.
        plot: Whether to save the per-level count chart.
    """

    n: int = 6
    level: Optional[int] = 5
    values: Optional[list] = None
    log_level: str = "INFO"
    charts_dir: str = "charts"
    csv_path: Optional[str] = None
    plot: bool = False

    def collection(self) -> list:
        return list(self.values) if self.values is not None else list(range(self.n))

    def validate(self) -> DemoConfig:
        if self.n <= 0:
            raise ValueError(f"n must be positive, got {self.n}")
        if self.level is not None and self.level < 0:
            raise ValueError(f"level must be non-negative, got {self.level}")
        if self.values is not None and len(self.values) != self.n:
            raise ValueError(f"values has {len(self.values)} elements, expected n={self.n}")
        if not isinstance(self.plot, bool):
            raise ValueError(f"plot must be true or false, got {self.plot!r}")
        return self


def config_from_dict(cfg: Dict[str, Any]) -> DemoConfig:
    """Build a validated ``DemoConfig`` from a parsed mapping."""
    charts_cfg = cfg.get("charts", {}) if isinstance(cfg.get("charts"), dict) else {}
    values = cfg.get("values")
    n = int(cfg.get("n", len(values) if values is not None else 6))
    level = cfg.get("level", 5)
    return DemoConfig(
        n=n,
        level=int(level) if level is not None else None,
        values=list(values) if values is not None else None,
        log_level=str(cfg.get("log_level", "INFO")),
        charts_dir=charts_cfg.get("dir", "charts"),
        csv_path=cfg.get("csv"),
        plot=charts_cfg.get("plot", False),
    ).validate()


def load_config(path: str) -> DemoConfig:
    """Load a demo configuration from a ``.yml``/``.yaml`` or JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content is not a mapping or holds invalid values.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    if path.endswith((".yml", ".yaml")):
        cfg = yaml.safe_load(text) or {}
    else:
        cfg = json.loads(text)

    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return config_from_dict(cfg)


def apply_overrides(config: DemoConfig, **overrides: Any) -> DemoConfig:
    """Return a copy of ``config`` with every non-None override applied."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    if "n" in changes and "values" not in changes and config.values is not None:
        # an explicit collection no longer matches a different n
        if len(config.values) != changes["n"]:
            changes["values"] = None
    return replace(config, **changes).validate()
