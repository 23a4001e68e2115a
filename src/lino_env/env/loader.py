"""
Process environment helpers for .lenv files.

This module loads .lenv files into `os.environ` and offers get/set shortcuts
against a default store, in the style of dotenv loaders. Variables that already
exist in the environment are never overwritten by a load.
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union, Sequence

from pydantic import ValidationError

from ..codec.parser import LinoEnvError
from ..models.options import DEFAULT_ENV_PATH, EnvOptions
from ..models.store import LinoEnv, read_lino_env


logger = logging.getLogger(__name__)

# Store used by get_env when no path is given
_default_instance: Optional[LinoEnv] = None


@dataclass
class LoadResult:
    """
    Result of loading .lenv files into the environment.

    Attributes:
        parsed: Key to value pairs found in the files, first file winning
        paths: Files that existed and were loaded, in load order
    """
    parsed: Dict[str, str] = field(default_factory=dict)
    paths: List[Path] = field(default_factory=list)


def load_env(path: Optional[Union[str, Path, Sequence[Union[str, Path]]]] = None,
             strict_mode: bool = False) -> LoadResult:
    """
    Load .lenv files and inject their values into the process environment.

    Files are processed in order and missing files are skipped. A key is only
    set in `os.environ` if it is not already there, so pre-existing variables
    and keys from earlier files take precedence.

    Args:
        path: File or list of files to load (defaults to `.lenv`)
        strict_mode: Whether malformed lines raise instead of being skipped

    Returns:
        LoadResult with the parsed values and the files that were loaded

    Raises:
        LinoEnvError: If the options are invalid or a file cannot be read
    """
    global _default_instance

    try:
        options = EnvOptions(paths=path, strict_mode=strict_mode)
    except ValidationError as e:
        raise LinoEnvError(f"Invalid environment options: {e}") from e

    result = LoadResult()
    for env_path in options.paths:
        if not Path(env_path).exists():
            logger.debug(f"Skipping missing .lenv file: {env_path}")
            continue

        env = LinoEnv(env_path).read(strict_mode=options.strict_mode)
        injected = 0
        for key, value in env.to_dict().items():
            result.parsed.setdefault(key, value)
            if key not in os.environ:
                os.environ[key] = value
                injected += 1

        if not result.paths:
            _default_instance = env
        result.paths.append(Path(env_path))
        logger.info(f"Loaded {injected} of {len(env.keys())} variables from {env_path}")

    return result


def get_env(key: str, path: Optional[Union[str, Path]] = None) -> Optional[str]:
    """
    Get a value from a .lenv file.

    Without a path, the default store is used. It is loaded lazily from
    `.lenv` in the working directory; if that file does not exist either, the
    process environment is consulted instead.

    Args:
        key: Key to look up
        path: Specific .lenv file to read

    Returns:
        The last value for the key, or None
    """
    global _default_instance

    if path is not None:
        return read_lino_env(path).get(key)

    if _default_instance is None and Path(DEFAULT_ENV_PATH).exists():
        _default_instance = read_lino_env(DEFAULT_ENV_PATH)

    if _default_instance is not None:
        return _default_instance.get(key)
    return os.environ.get(key)


def set_env(key: str, value: str, path: Union[str, Path] = DEFAULT_ENV_PATH) -> LinoEnv:
    """
    Set a value in a .lenv file and in the process environment.

    The file is read (or started empty), the key replaced with the single
    value, and the file rewritten. Unlike load_env, this always overwrites
    `os.environ[key]`.

    Args:
        key: Key to set
        value: New value
        path: .lenv file to update (defaults to `.lenv`)

    Returns:
        The updated store

    Raises:
        LinoEnvError: If the file cannot be read or written
    """
    global _default_instance

    env = read_lino_env(path)
    env.set(key, value)
    env.write()

    if str(path) == DEFAULT_ENV_PATH:
        _default_instance = env

    os.environ[key] = value
    return env
