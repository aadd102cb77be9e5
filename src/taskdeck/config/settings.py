"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    workspace_root: Path = Field(
        default=Path(),
        description="Path to the workspace directory containing taskdeck.yml and tasks.md",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    poll_interval: float = Field(
        default=2.0,
        gt=0,
        description="Seconds between checks for external changes to the task file",
    )

    model_config = {
        "env_prefix": "TASKDECK_",
    }
