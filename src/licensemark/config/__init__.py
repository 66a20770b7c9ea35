# topmark:header:start
#
#   project      : LicenseMark
#   file         : __init__.py
#   file_relpath : src/licensemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseMark configuration: the immutable model and its TOML loader."""

from __future__ import annotations

from licensemark.config.io import load_config, load_toml_dict
from licensemark.config.model import Config, LangRule

__all__ = [
    "Config",
    "LangRule",
    "load_config",
    "load_toml_dict",
]
