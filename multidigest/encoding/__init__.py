"""
Wire and text encodings for multihash values.
"""

from . import text, varint

__all__ = ["text", "varint"]
