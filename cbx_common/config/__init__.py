"""Configuration helpers for cbx_common."""

from .env import parse_bool_env, parse_int_env, parse_positive_int_env

__all__ = [
    "parse_bool_env",
    "parse_int_env",
    "parse_positive_int_env",
]
