from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .naming import DEFAULT_DIVIDER, DEFAULT_EXTENSION

DEFAULT_CONFIG_NAME = "nzbsplit.yml"


class SplitSettings(BaseModel):
    """Options controlling where and how split parts are written."""

    output_dir: Path = Field(
        default=Path("."),
        description="Directory receiving the split NZB parts.",
    )
    part_divider: str = Field(
        default=DEFAULT_DIVIDER,
        min_length=1,
        description="Text placed between the original name and the part index.",
    )
    zero_padding: int = Field(
        default=0,
        ge=0,
        description="Pad part indexes with zeroes to this many digits (0 or 1 disables).",
    )
    extension: str = Field(
        default=DEFAULT_EXTENSION,
        description="Extension of the input manifest and of every part.",
    )

    @field_validator("output_dir", mode="before")
    def _ensure_path(cls, value: Any) -> Path:
        return Path(value)

    @field_validator("extension")
    def _normalize_extension(cls, value: str) -> str:
        text = value.strip()
        if not text:
            return DEFAULT_EXTENSION
        if not text.startswith("."):
            text = f".{text}"
        return text


def load_settings(path: str | Path | None = None) -> SplitSettings:
    """Load settings from a YAML file.

    Without ``path`` the defaults are returned, unless ``nzbsplit.yml`` exists
    in the working directory. A relative ``output_dir`` is resolved against
    the directory holding the config file.
    """
    if path is None:
        candidate = Path(DEFAULT_CONFIG_NAME)
        if not candidate.exists():
            return SplitSettings()
    else:
        candidate = Path(path)
        if candidate.is_dir():
            candidate = candidate / DEFAULT_CONFIG_NAME
        if not candidate.exists():
            raise FileNotFoundError(candidate)

    with candidate.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {candidate} should define a mapping.")

    try:
        settings = SplitSettings(**data)
    except ValidationError as exc:
        raise ValueError(f"Invalid config file {candidate}: {exc}") from exc

    if not settings.output_dir.is_absolute():
        settings.output_dir = (candidate.parent.resolve() / settings.output_dir).resolve()
    return settings
