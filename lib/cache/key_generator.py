"""
Key generator implementations for lib.cache

Available Generators:
    - Md5KeyGenerator: MD5 hex digest of a string, used as cache file stem
"""

import hashlib

from .types import KeyGenerator


class Md5KeyGenerator(KeyGenerator[str]):
    """
    MD5 hash key generator for free-text string keys

    The same input always produces the same 32-character lowercase hex
    digest. Input is hashed verbatim: no case folding, no whitespace
    trimming, no salt. MD5 is used as a fast non-cryptographic digest here,
    the output only has to be stable and filesystem-safe.

    Type: KeyGenerator[str]

    Example:
        >>> generator = Md5KeyGenerator()
        >>> generator.generateKey("Berlin") == generator.generateKey("Berlin")
        True
        >>> generator.generateKey("Berlin") == generator.generateKey("berlin")
        False
    """

    def generateKey(self, obj: str) -> str:
        """
        Generate MD5 hex digest from string input

        Args:
            obj: String to hash

        Returns:
            str: 32-character hexadecimal MD5 digest

        Raises:
            TypeError: If obj is not a string
        """
        if not isinstance(obj, str):
            raise TypeError(f"Md5KeyGenerator expects string input, got {type(obj).__name__}")

        return hashlib.md5(obj.encode("utf-8")).hexdigest()
