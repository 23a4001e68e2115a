"""
Data models for lino-env.

This module contains the .lenv store and the environment loading options.
"""

from .options import DEFAULT_ENV_PATH, EnvOptions
from .store import LinoEnv, read_lino_env, write_lino_env

__all__ = ['DEFAULT_ENV_PATH', 'EnvOptions', 'LinoEnv', 'read_lino_env', 'write_lino_env']
