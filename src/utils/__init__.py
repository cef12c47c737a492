"""Utility modules shared by the pattern examples."""

from .env_utils import parse_bool_env, parse_str_env

__all__ = [
    "parse_bool_env",
    "parse_str_env",
]
