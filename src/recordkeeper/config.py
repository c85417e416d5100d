"""Centralized configuration for recordkeeper using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration loaded from ``RECORDKEEPER_*`` environment variables.

    Every default is the file name the demos have always used, so running
    without any environment behaves exactly like the hardcoded programs.
    """

    model_config = SettingsConfigDict(
        env_prefix="RECORDKEEPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Files
    inventory_file: Path = Field(default=Path("inventory.json"), description="JSON snapshot of the inventory demo")
    scores_input_file: Path = Field(
        default=Path("student_scores.txt"), description="Input for the grading demo, one id,name,score per line"
    )
    grade_report_file: Path = Field(default=Path("grade_report.txt"), description="Report written by the grading demo")

    # Health demo
    default_patient_id: int = Field(default=1, ge=1, description="Patient shown when the typed ID is not a number")

    # Logging
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="warning", description="Root logging level"
    )
    log_json: bool = Field(default=False, description="Emit structured JSON log lines")


def get_settings() -> Settings:
    """Return fresh settings read from the current environment."""
    return Settings()
