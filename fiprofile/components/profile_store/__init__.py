"""
Profile store component - serialize, validate and age the stored profile.
"""

from ._codec import decode_profile, encode_profile, shape_problem
from .component import ProfileStore, storage_key

__all__ = [
    "ProfileStore",
    "decode_profile",
    "encode_profile",
    "shape_problem",
    "storage_key",
]
