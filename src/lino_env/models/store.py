"""
In-memory store for .lenv data.

This module defines LinoEnv, an ordered multi-map from keys to lists of string
values bound to a .lenv file path, together with convenience functions for
reading and creating files.
"""

from typing import Dict, List, Optional, Any, Mapping, Union
from pathlib import Path
from pydantic import BaseModel, Field, field_validator

from ..codec.parser import LenvParser, LinoEnvError


class LinoEnv(BaseModel):
    """
    Ordered multi-map backed by a .lenv file.

    Each key holds a list of values. `add` appends a value, `set` replaces all
    values with one, and `get` returns the most recently added value. Key order
    follows first insertion and survives a write/read cycle.

    Attributes:
        file_path: Path of the backing .lenv file
        data: Mapping of key to its ordered values
    """

    file_path: Optional[str] = Field(None, description="Path of the backing .lenv file")
    data: Dict[str, List[str]] = Field(default_factory=dict, description="Key to ordered values")

    def __init__(self, file_path: Optional[Union[str, Path]] = None, **kwargs: Any):
        super().__init__(file_path=file_path, **kwargs)

    @field_validator('file_path', mode='before')
    @classmethod
    def validate_file_path(cls, v) -> Optional[str]:
        """Accept Path objects and expand the user directory."""
        if v is None:
            return v
        return str(Path(v).expanduser())

    @field_validator('data', mode='before')
    @classmethod
    def validate_data(cls, v) -> Dict[str, List[str]]:
        """Wrap single string values in a list."""
        if not isinstance(v, Mapping):
            return v
        return {
            key: [values] if isinstance(values, str) else list(values)
            for key, values in v.items()
        }

    def get(self, key: str) -> Optional[str]:
        """Get the last value stored for a key, or None."""
        values = self.data.get(key)
        if not values:
            return None
        return values[-1]

    def get_all(self, key: str) -> List[str]:
        """Get every value stored for a key, in insertion order."""
        return list(self.data.get(key, []))

    def set(self, key: str, value: str) -> None:
        """Replace all values of a key with a single value."""
        self.data[key] = [value]

    def add(self, key: str, value: str) -> None:
        """Append a value to a key, creating the key if needed."""
        self.data.setdefault(key, []).append(value)

    def has(self, key: str) -> bool:
        """Check whether a key has at least one value."""
        return bool(self.data.get(key))

    def delete(self, key: str) -> None:
        """Remove a key and all of its values."""
        self.data.pop(key, None)

    def keys(self) -> List[str]:
        """Get all keys in first-insertion order."""
        return list(self.data.keys())

    def to_dict(self) -> Dict[str, str]:
        """Collapse each key to its last value."""
        return {key: values[-1] for key, values in self.data.items() if values}

    def read(self, strict_mode: bool = False) -> 'LinoEnv':
        """
        Replace the store contents with the backing file's entries.

        A missing file leaves the store empty. Malformed lines are skipped
        unless strict_mode is set.

        Args:
            strict_mode: If True, raise on lines without a separator

        Returns:
            This store, to allow `LinoEnv(path).read()`

        Raises:
            LinoEnvError: If no path is bound, or the file cannot be read
        """
        result = LenvParser(strict_mode=strict_mode).parse_file(self._require_path())
        self.data = result.to_multimap()
        return self

    def write(self) -> 'LinoEnv':
        """
        Overwrite the backing file with the store contents.

        Returns:
            This store

        Raises:
            LinoEnvError: If no path is bound, or the file cannot be written
        """
        LenvParser().write_file(self._require_path(), self.data)
        return self

    def _require_path(self) -> Path:
        if self.file_path is None:
            raise LinoEnvError("No file path bound to this LinoEnv")
        return Path(self.file_path)

    def __str__(self) -> str:
        return f"LinoEnv(file_path={self.file_path!r}, keys={self.keys()})"


def read_lino_env(file_path: Union[str, Path]) -> LinoEnv:
    """
    Convenience function to read a .lenv file.

    Args:
        file_path: Path to the .lenv file (a missing file yields an empty store)

    Returns:
        LinoEnv populated from the file
    """
    return LinoEnv(file_path).read()


def write_lino_env(file_path: Union[str, Path], values: Mapping[str, str]) -> LinoEnv:
    """
    Convenience function to create a .lenv file from a mapping.

    Args:
        file_path: Path to the .lenv file
        values: Key to value pairs to write

    Returns:
        LinoEnv holding the written data

    Raises:
        LinoEnvError: If the file cannot be written
    """
    env = LinoEnv(file_path)
    for key, value in values.items():
        env.set(key, value)
    return env.write()
