"""
Value converter implementations for cache storage

This module provides JSON conversion for objects which need to be stored
in text-based cache storage (e.g. cache files on disk).
"""

import json
from typing import Optional

import lib.utils as utils

from .types import V, ValueConverter


class JsonValueConverter(ValueConverter[V]):
    """
    JSON converter for serializable objects

    Key order of the original object is preserved on encode. Pass `indent`
    to get pretty-printed output.
    """

    def __init__(self, indent: Optional[int] = None):
        """
        Initialize the JSON value converter

        Args:
            indent: Indentation for pretty-printed output, None for compact JSON
        """
        self.indent = indent

    def encode(self, obj: V) -> str:
        if self.indent is None:
            return utils.jsonDumps(obj, sort_keys=False)
        return utils.jsonDumps(obj, sort_keys=False, indent=self.indent)

    def decode(self, value: str) -> V:
        return json.loads(value)
