"""Runtime options for loading alpine-data."""

from pydantic import BaseModel, Field, field_validator


class LiftOptions(BaseModel):
    """Options threaded through loading, logging and CLI output."""
    log_level: str = Field(default="WARNING")
    quiet: bool = Field(default=False, description="Suppress informational output")
    merge_defaults: bool = Field(
        default=True, description="Overlay documents on the baseline defaults"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()
