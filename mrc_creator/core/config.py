"""Application configuration."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

import yaml

ENV_PREFIX = "MRC_CREATOR_"


def _default_home() -> Path:
    return Path.home() / ".mrc-creator"


def default_config_path() -> Path:
    return _default_home() / "config.yaml"


@dataclass
class AppConfig:
    workouts_dir: Path = field(default_factory=lambda: _default_home() / "workouts")
    ramp_split_threshold_minutes: float = 0.2
    color_max_value: float = 500.0
    layout_gap: float = 1.0
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.workouts_dir = Path(self.workouts_dir).expanduser()
        self.ramp_split_threshold_minutes = float(self.ramp_split_threshold_minutes)
        self.color_max_value = float(self.color_max_value)
        self.layout_gap = float(self.layout_gap)
        self.log_level = str(self.log_level).upper()

        if self.ramp_split_threshold_minutes <= 0:
            raise ValueError("ramp_split_threshold_minutes must be > 0")
        if self.color_max_value <= 0:
            raise ValueError("color_max_value must be > 0")
        if self.layout_gap < 0:
            raise ValueError("layout_gap must be >= 0")


def load_config(config_file: str | Path | None = None) -> AppConfig:
    """Load configuration from a YAML file, or from environment variables."""
    config_path = Path(config_file) if config_file else default_config_path()

    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as handle:
            config_data = yaml.safe_load(handle) or {}
        if not isinstance(config_data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
        known = {item.name for item in fields(AppConfig)}
        unknown = sorted(set(config_data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")
        return AppConfig(**config_data)

    env_values: dict[str, str] = {}
    for item in fields(AppConfig):
        raw = os.getenv(f"{ENV_PREFIX}{item.name.upper()}")
        if raw is not None and raw.strip():
            env_values[item.name] = raw.strip()
    return AppConfig(**env_values)


def create_sample_config(config_file: str | Path | None = None) -> Path:
    config_path = Path(config_file) if config_file else default_config_path()
    if config_path.exists():
        return config_path

    sample = asdict(AppConfig())
    sample["workouts_dir"] = str(sample["workouts_dir"])
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(sample, handle, default_flow_style=False)
    return config_path
