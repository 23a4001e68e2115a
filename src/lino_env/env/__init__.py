"""
Process environment integration for .lenv files.
"""

from .loader import LoadResult, get_env, load_env, set_env

__all__ = ['LoadResult', 'get_env', 'load_env', 'set_env']
