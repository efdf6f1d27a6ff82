"""Configuration settings for figsync."""

from pathlib import Path

from pydantic import BaseModel, Field

from figsync.host.rest import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class HostConfig(BaseModel):
    """Where the design document comes from.

    Either ``snapshot_path`` or ``file_key`` with ``token`` selects the host.
    """

    snapshot_path: Path | None = Field(
        default=None,
        description="Path to a document snapshot JSON file",
    )
    file_key: str | None = Field(
        default=None,
        description="File key for the REST host",
    )
    token: str | None = Field(
        default=None,
        description="Personal access token for the REST host",
        repr=False,
    )
    selection_ids: list[str] = Field(
        default_factory=list,
        description="Node ids treated as the selection by the REST host",
    )
    api_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="REST API base URL",
    )
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0.0,
        le=600.0,
        description="REST request timeout in seconds",
    )

    @property
    def uses_rest(self) -> bool:
        """Whether this configuration selects the REST host."""
        return self.snapshot_path is None and self.file_key is not None


class OutputConfig(BaseModel):
    """Configuration for writing export documents."""

    output_path: Path | None = Field(
        default=None,
        description="Export file path (None = print to stdout)",
    )
    indent: int | None = Field(
        default=2,
        ge=0,
        le=8,
        description="JSON indentation (None = compact)",
    )
    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in the JSON output",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FigsyncSettings(BaseModel):
    """Main application settings."""

    host: HostConfig = Field(default_factory=HostConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FigsyncSettings:
    """Get default application settings."""
    return FigsyncSettings()
