"""
Ordered dictionaries and sets which only require their keys to provide an
equality check (no hashing nor ordering is needed).
"""
__version__ = "0.1.0"
version_info = [int(x) for x in __version__.split(".")]

from assoc_collections.protocols import Unit
from assoc_collections.assoc_dict import AssocDict
from assoc_collections.assoc_set import AssocSet, UNIT

__all__ = ["AssocDict", "AssocSet", "Unit", "UNIT"]
