"""
Core type definitions and protocols for lib.cache

This module contains the fundamental type definitions and protocols
used throughout the cache library.
"""

from typing import Protocol, TypeVar

# Type variables for generic cache operations
K = TypeVar("K")  # Key type - can be any hashable type
V = TypeVar("V")  # Value type - can be any type
T = TypeVar("T", contravariant=True)  # Generic object type for key generators


class KeyGenerator(Protocol[T]):
    """
    Protocol for generating cache keys from objects

    Generated keys may be used as filename stems, so implementations
    must return filesystem-safe strings.

    Type Parameters:
        T: The type of objects that can be converted to cache keys

    Example:
        >>> generator = Md5KeyGenerator()
        >>> key = generator.generateKey("Berlin")
        >>> print(len(key))  # 32
    """

    def generateKey(self, obj: T) -> str:
        """
        Generate string cache key from object

        Args:
            obj: The object to convert to a cache key

        Returns:
            str: A string representation suitable for use as a cache key
        """
        ...


class ValueConverter(Protocol[V]):
    """
    Protocol for converting objects to cache and back

    Type Parameters:
        V: The type of objects that can be converted to cache values
    """

    def encode(self, obj: V) -> str:
        """
        Convert object to cache value

        Args:
            obj: The object to convert to a cache value

        Returns:
            str: A string representation suitable for use as a cache value
        """
        ...

    def decode(self, value: str) -> V:
        """
        Decode cache value to object

        Args:
            value: The cache value to decode

        Returns:
            V: The decoded object

        Raises:
            ValueError: If value can not be decoded
        """
        ...
