"""
coasterbuilder - Procedural minecart roller-coaster builder for block worlds.

This package provides composable track pieces with:
- Straight sections, ramps, turns, banked turns and U-turns
- Spirals and free-fall drops
- Boarding station and end buffer fixtures
- Fluid protection and decoration along the track
- An in-memory block world and builder cursor to build into
"""

__version__ = "0.1.0"

from coasterbuilder.track.generator import CoasterGenerator
from coasterbuilder.world.builder import Builder
from coasterbuilder.world.world import BlockWorld

__all__ = ["CoasterGenerator", "Builder", "BlockWorld", "__version__"]
