"""Configuration management for the decoder."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class DecoderConfig(BaseModel):
    """Configuration for decoding a single digit sequence."""

    engine: Literal["recursive", "table"] = "recursive"
    zero_policy: Literal["strict", "empty"] = Field(
        default="strict",
        description='"strict" rejects groups evaluating to 0; "empty" lets "0"/"00" translate to nothing',
    )
    prune: bool = Field(default=True, description="Skip branches whose leading group is invalid")
    max_length: Optional[int] = Field(default=None, ge=1)
    max_messages: Optional[int] = Field(default=None, ge=1)  # Per sequence
    workers: int = Field(default=1, ge=1)


class OutputConfig(BaseModel):
    """Configuration for batch output."""

    output_dir: Path = Path("data/decoded_output")
    save_full_files: bool = True  # One CSV with every message
    save_single_lines: bool = False  # One CSV per input line
    include_groupings: bool = True


class Config(BaseModel):
    """Main configuration for the decoding pipeline."""

    input_file: Optional[Path] = None
    decoder: DecoderConfig = Field(default_factory=DecoderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
