"""
Query String Builder

Keeps parameters in insertion order. A parameter added with encode=False
keeps its commas literal (used for the comma-joined currency list).
"""

from typing import Any
from urllib.parse import quote


class QueryStringBuilder:
    """Accumulate key/value pairs and render them as ``?k1=v1&k2=v2``."""

    def __init__(self):
        self._params: list[tuple[str, str]] = []

    def add_param(self, key: str, value: Any, encode: bool = True) -> "QueryStringBuilder":
        safe = "" if encode else ","
        self._params.append((quote(str(key), safe=""), quote(str(value), safe=safe)))
        return self

    def build(self) -> str:
        if not self._params:
            return ""
        return "?" + "&".join(f"{key}={value}" for key, value in self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __str__(self) -> str:
        return self.build()
