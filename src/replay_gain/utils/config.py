from __future__ import annotations

from pathlib import Path
from typing import Literal

import json

from pydantic import BaseModel, Field, field_validator

from replay_gain.histogram import (
    DEFAULT_PERCENTILE,
    MAX_LOUDNESS_DB,
    REFERENCE_LOUDNESS_DB,
    STEPS_PER_DB,
)


class AnalysisSettings(BaseModel):
    reference_loudness_db: float = Field(REFERENCE_LOUDNESS_DB)
    percentile: float = Field(DEFAULT_PERCENTILE, gt=0.0, lt=1.0)
    steps_per_db: int = Field(STEPS_PER_DB, ge=1, le=1_000)
    max_loudness_db: float = Field(MAX_LOUDNESS_DB, gt=0.0, le=200.0)

    model_config = {"frozen": True}


class ScanConfig(BaseModel):
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    block_frames: int = Field(4_096, ge=1)
    endianness: Literal["native", "little", "big"] = "native"

    @field_validator("endianness", mode="before")
    @classmethod
    def _normalize_endianness(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


def load_scan_config(path: Path) -> ScanConfig:
    data = _load_config_data(path)
    return ScanConfig.model_validate(data)


def _load_config_data(path: Path) -> dict:
    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:
            raise ImportError("PyYAML is required to load YAML configs.") from exc

        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
