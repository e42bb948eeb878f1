"""Listing of the entries of a directory."""

from __future__ import annotations

import os
from typing import Union


def scan_dir(dir_name: Union[str, os.PathLike]) -> list[str]:
    """Paths ``dir_name/entry`` of every entry of the directory, sorted by name."""
    base = os.fspath(dir_name)
    return [f"{base}/{entry}" for entry in sorted(os.listdir(base))]