"""
Configuration Models

Pydantic models for matching parameter validation.
Defaults reproduce the standard scoring behavior; a JSON file only needs the
values it overrides.
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class ThresholdConfig(BaseModel):
    """Score cut-offs and similarity thresholds used while scoring."""

    min_score: float = Field(
        default=20.0,
        ge=0.0,
        lt=100.0,
        description="Matches must score strictly above this value to be listed",
    )
    tie_margin: float = Field(
        default=2.0,
        ge=0.0,
        description="Scores closer than this are ordered by common interests",
    )
    research_similarity: float = Field(default=0.6, ge=0.0, le=1.0)
    skills_similarity: float = Field(default=0.7, ge=0.0, le=1.0)
    experience_similarity: float = Field(default=0.5, ge=0.0, le=1.0)
    career_similarity: float = Field(default=0.6, ge=0.0, le=1.0)


class BoostTier(BaseModel):
    """Three-step interest boost: strong, moderate, and weak base scores."""

    strong_threshold: float = Field(ge=0.0, le=100.0)
    moderate_threshold: float = Field(ge=0.0, le=100.0)
    strong_boost: float = Field(ge=0.0, le=100.0)
    moderate_boost: float = Field(ge=0.0, le=100.0)
    weak_boost: float = Field(ge=0.0, le=100.0)

    @field_validator("moderate_threshold")
    @classmethod
    def validate_threshold_ordering(cls, v: float, info: ValidationInfo) -> float:
        """Validate that moderate_threshold <= strong_threshold."""
        strong = info.data.get("strong_threshold")
        if strong is not None and v > strong:
            raise ValueError(
                f"moderate_threshold ({v}) must not exceed strong_threshold ({strong})"
            )
        return v

    def boost_for(self, base_score: float) -> float:
        """Return the boost for a base score."""
        if base_score >= self.strong_threshold:
            return self.strong_boost
        if base_score >= self.moderate_threshold:
            return self.moderate_boost
        return self.weak_boost


class BoostConfig(BaseModel):
    """Interest boost tiers per viewing direction."""

    student_view: BoostTier = Field(
        default_factory=lambda: BoostTier(
            strong_threshold=80.0,
            moderate_threshold=60.0,
            strong_boost=5.0,
            moderate_boost=8.0,
            weak_boost=12.0,
        )
    )
    professor_view: BoostTier = Field(
        default_factory=lambda: BoostTier(
            strong_threshold=85.0,
            moderate_threshold=70.0,
            strong_boost=8.0,
            moderate_boost=12.0,
            weak_boost=18.0,
        )
    )


class BatchConfig(BaseModel):
    """Batch configuration for coordinator scoring passes."""

    match_batch_size: int = Field(default=25, gt=0, lt=1000)


class MatchingParams(BaseModel):
    """Matching parameters configuration model."""

    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)
    boosts: BoostConfig = Field(default_factory=BoostConfig)
    batch_config: BatchConfig = Field(default_factory=BatchConfig)
    max_results: Optional[int] = Field(default=None, gt=0)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "MatchingParams":
        """Load matching parameters from config file.

        Args:
            config_path: Path to matching_params.json (defaults to config/matching_params.json)

        Returns:
            MatchingParams: Validated configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config validation fails
        """
        if config_path is None:
            config_path = Path("config/matching_params.json")
        else:
            config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}. "
                f"Copy {config_path.stem}.example.json to {config_path.name}"
            )

        with open(config_path, "r", encoding="utf-8") as f:
            config_data = json.load(f)

        return cls(**config_data)
