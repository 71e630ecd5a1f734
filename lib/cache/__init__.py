"""
lib.cache - Generic cache building blocks

Core Components:
- CacheInterface: Abstract base class for cache implementations
- DictCache: In-memory memo without expiration
- KeyGenerator / Md5KeyGenerator: Deterministic cache key derivation
- ValueConverter / JsonValueConverter: Text (de)serialization of cached values

Example Usage:
    >>> from lib.cache import DictCache, Md5KeyGenerator
    >>>
    >>> keyGenerator = Md5KeyGenerator()
    >>> memo = DictCache[str, dict]()
    >>> await memo.set(keyGenerator.generateKey("Berlin"), {"main": {"temp": 21.5}})
"""

from .dict_cache import DictCache
from .interface import CacheInterface
from .key_generator import Md5KeyGenerator
from .types import K, KeyGenerator, T, V, ValueConverter
from .value_converter import JsonValueConverter

__all__ = [
    # Core types
    "KeyGenerator",
    "ValueConverter",
    "K",
    "V",
    "T",
    # Interfaces
    "CacheInterface",
    # Implementations
    "DictCache",
    # Key generators
    "Md5KeyGenerator",
    # Value Converters
    "JsonValueConverter",
]
