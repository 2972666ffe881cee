"""
Blocks - Materials, items and fill modes known to the world.

Defines:
- Block: closed set of block materials
- Fluid: fluid families and their block variants
- Item: inventory items
- FillMode: how bulk fills treat existing blocks
"""

from enum import Enum
from typing import Dict, Tuple


class Block(Enum):
    """Block materials."""
    AIR = "air"

    # Structure
    OAK_PLANKS = "oak_planks"
    STONE = "stone"
    DIRT = "dirt"
    COBBLESTONE = "cobblestone"
    GLASS = "glass"
    PINK_CONCRETE = "pink_concrete"
    QUARTZ_BLOCK = "quartz_block"
    QUARTZ_SLAB = "quartz_slab"

    # Rails and redstone
    RAIL = "rail"
    POWERED_RAIL = "powered_rail"
    REDSTONE_BLOCK = "redstone_block"
    REDSTONE_WIRE = "redstone_wire"
    WARPED_BUTTON = "warped_button"

    # Fluids: still source blocks and their flowing (levelled) variants
    WATER = "water"
    FLOWING_WATER = "flowing_water"
    LAVA = "lava"
    FLOWING_LAVA = "flowing_lava"

    # Lighting
    TORCH = "torch"
    LANTERN = "lantern"
    GLOWSTONE = "glowstone"


class Fluid(Enum):
    """Fluid families."""
    WATER = "water"
    LAVA = "lava"

    @property
    def variants(self) -> Tuple[Block, ...]:
        """All block variants a fluid can appear as in the world."""
        return FLUID_VARIANTS[self]


# A fluid shows up either as its still source block or as a flowing block
# with a level; protection has to sweep both.
FLUID_VARIANTS: Dict[Fluid, Tuple[Block, ...]] = {
    Fluid.WATER: (Block.FLOWING_WATER, Block.WATER),
    Fluid.LAVA: (Block.FLOWING_LAVA, Block.LAVA),
}


class Item(Enum):
    """Items that can be handed to a player."""
    MINECART = "minecart"


class FillMode(Enum):
    """Bulk fill behaviour."""
    REPLACE = "replace"  # Overwrite everything in the box
    KEEP = "keep"        # Only fill cells that are currently air
