"""
World module - Block storage and the builder cursor.

This module contains:
- BlockWorld: In-memory voxel world with place/test/replace/fill
- Builder: Movable cursor with position and facing
- Position and direction types
- Block, Item and FillMode enumerations
"""

from coasterbuilder.world.blocks import Block, Fluid, FillMode, Item
from coasterbuilder.world.builder import Builder
from coasterbuilder.world.position import (
    CardinalDirection,
    CompassDirection,
    Position,
    RelativeDirection,
    TurnDirection,
)
from coasterbuilder.world.world import LOCAL_PLAYER, BlockWorld, WorldLimits

__all__ = [
    "Block",
    "Fluid",
    "FillMode",
    "Item",
    "Builder",
    "CardinalDirection",
    "CompassDirection",
    "Position",
    "RelativeDirection",
    "TurnDirection",
    "LOCAL_PLAYER",
    "BlockWorld",
    "WorldLimits",
]
