"""Pure mock-data package for the visualization gallery.

This package produces the synthetic datasets rendered by the gallery. It must
not import Django: generators are deterministic functions of a SeededRandom
stream (or of the bundled fixtures) and return frozen DTOs.
"""

from .gallery_data import GalleryData, build_gallery_data
from .prng import SeededRandom

__all__ = ["GalleryData", "SeededRandom", "build_gallery_data"]
