"""
SumForge: Parse, edit, and re-serialize go.sum checksum manifests.

Round-trip faithful parsing with tombstone-based editing and canonical formatting.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
