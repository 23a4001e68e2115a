"""
lino-env - Core Package

Read and write .lenv files: plain text configuration where each line holds a
`KEY: value` pair and keys may repeat.
"""

__version__ = "0.1.0"
__author__ = "lino-env Team"

from .codec import LenvParser, LinoEnvError, ParseResult, validate_lenv_file
from .env import LoadResult, get_env, load_env, set_env
from .models import EnvOptions, LinoEnv, read_lino_env, write_lino_env

__all__ = [
    'EnvOptions',
    'LenvParser',
    'LinoEnv',
    'LinoEnvError',
    'LoadResult',
    'ParseResult',
    'get_env',
    'load_env',
    'read_lino_env',
    'set_env',
    'validate_lenv_file',
    'write_lino_env',
    '__version__'
]
