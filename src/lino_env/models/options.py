"""
Options for loading .lenv files into the process environment.
"""

from typing import List
from pathlib import Path
from pydantic import BaseModel, Field, field_validator


DEFAULT_ENV_PATH = '.lenv'


class EnvOptions(BaseModel):
    """
    Settings for environment injection.

    Attributes:
        paths: .lenv files to load, in priority order
        strict_mode: Whether malformed lines raise instead of being skipped
    """

    paths: List[str] = Field(default_factory=lambda: [DEFAULT_ENV_PATH], description="Files to load in priority order")
    strict_mode: bool = Field(False, description="Raise on malformed lines")

    @field_validator('paths', mode='before')
    @classmethod
    def validate_paths(cls, v) -> List[str]:
        """Accept a single path and expand user directories."""
        if v is None:
            return [DEFAULT_ENV_PATH]
        if isinstance(v, (str, Path)):
            v = [v]

        normalized = []
        for path in v:
            if not isinstance(path, (str, Path)):
                raise ValueError(f"Invalid .lenv path: {path!r}")
            normalized.append(str(Path(path).expanduser()))

        if not normalized:
            raise ValueError("At least one .lenv path is required")
        return normalized
