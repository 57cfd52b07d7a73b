"""An arcade space shooter on pygame, with sprites, pixel-mask collisions, keyed animations and edge-aware input."""

__version__ = "0.1.0"