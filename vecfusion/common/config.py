"""Configuration management.

Environment-driven configuration for the fusion layer, built on
``pydantic_settings.BaseSettings`` so values can come from environment
variables, a ``.env`` file, or defaults.

Highlights
- Strongly‑typed settings with sensible defaults
- Field names double as (case-insensitive) environment variable names,
  e.g. ``vf_fusion_topn`` is read from ``VF_FUSION_TOPN``
- ``vf_fusion_weights`` is parsed from a JSON object

Usage
- ``config = FusionConfig()`` or ``config = get_config()``
"""

from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FusionConfig(BaseSettings):
    """Configuration for logging, metrics, and the default fusion algorithm.

    Notes
    - Construction knobs only; a fuser built from this config is immutable.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    vf_env: str = Field(default="local")

    # Logging
    vf_log_level: str = Field(default="INFO")
    vf_log_format: str = Field(default="json")

    # Fusion
    vf_fusion_algorithm: str = Field(default="rrf")
    vf_fusion_topn: int = Field(default=10, ge=0)
    vf_rrf_rank_constant: int = Field(default=60)
    vf_weighted_metric: str = Field(default="cosine")
    vf_fusion_weights: Dict[str, float] = Field(default_factory=dict)

    # Metrics
    vf_metrics_enabled: bool = Field(default=True)

    @field_validator("vf_fusion_algorithm", "vf_weighted_metric")
    @classmethod
    def _lowercase(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("vf_log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ("json", "console"):
            raise ValueError(f"Unsupported log format: {value}")
        return value


def get_config() -> FusionConfig:
    """Read configuration from the current environment."""
    return FusionConfig()
