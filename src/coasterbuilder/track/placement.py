"""
Rail placement - Leaf operations that write single rails into the world.

Provides:
- Plain, powered and shape-only powered rail placement
- Fluid protection around new track
- Head-room clearing above rails
- Decoration beside the track
"""

from typing import Optional
import logging

from coasterbuilder.track.config import TrackConfiguration
from coasterbuilder.world.blocks import Block
from coasterbuilder.world.position import CardinalDirection, Position
from coasterbuilder.world.world import BlockWorld

logger = logging.getLogger(__name__)

# Cells of air kept above every rail so a rider fits through tunnels
HEADROOM = 3


class RailPlacer:
    """Places rails and their supporting blocks.

    Every rail is a two-block column: a base block at the given position
    and the rail itself one block above. The placer never touches track
    statistics; counting is the caller's job.
    """

    def __init__(self, world: BlockWorld, config: TrackConfiguration):
        """Initialize placer.

        Args:
            world: World to write into
            config: Track configuration (read on every call)
        """
        self.world = world
        self.config = config

    def place_rail(self, position: Position) -> None:
        """Place a plain rail on top of the configured base block."""
        self._place_rail_column(position, self.config.rail_base, Block.RAIL)

    def place_powered_rail(self, position: Position) -> None:
        """Place a powered rail on top of a redstone block."""
        self._place_rail_column(position, Block.REDSTONE_BLOCK, Block.POWERED_RAIL)

    def place_unpowered_powered_rail(self, position: Position) -> None:
        """Place a powered rail block without a power source beneath it.

        Used where the rail shape matters but no boost is wanted, e.g. the
        middle of a ramp.
        """
        self._place_rail_column(position, self.config.rail_base, Block.POWERED_RAIL)

    def place_decoration(self, position: Position) -> None:
        """Place decoration blocks on both sides of a rail.

        Each side gets the decoration only if that cell is air. Nothing is
        touched when decoration is disabled.

        Args:
            position: Base position of the rail to decorate
        """
        block = self.config.decoration_block
        if block is None:
            return

        left = position.move(CardinalDirection.WEST, 1).move(CardinalDirection.UP, 2)
        right = position.move(CardinalDirection.EAST, 1).move(CardinalDirection.UP, 2)

        for side in (left, right):
            if self.world.test(Block.AIR, side):
                self.world.place(block, side)

    def clear_air_above(self, position: Position, start: int, count: int) -> None:
        """Make sure a vertical run of cells above a position is air.

        Cells that are already air are skipped so the world never sees a
        redundant placement.

        Args:
            position: Base position
            start: Offset above `position` of the first cell (0 = the position itself)
            count: Number of consecutive cells
        """
        for i in range(count):
            cell = position.move(CardinalDirection.UP, start + i)
            if not self.world.test(Block.AIR, cell):
                self.world.place(Block.AIR, cell)

    def protect_fluids(
        self,
        corner_one: Optional[Position],
        corner_two: Optional[Position],
    ) -> None:
        """Turn fluids inside a box into glass.

        Both the still and flowing variant of each protected fluid are
        swept. Does nothing when protection is disabled.

        Args:
            corner_one: One corner of the box
            corner_two: Opposite corner of the box
        """
        for fluid in self.config.protected_fluids:
            for variant in fluid.variants:
                replaced = self.world.replace(Block.GLASS, variant, corner_one, corner_two)
                if replaced:
                    logger.debug("Replaced %d %s blocks with glass", replaced, variant.value)

    def _place_rail_column(self, position: Position, base: Block, rail: Block) -> None:
        self.world.place(base, position)

        if self.config.protects_fluids:
            corner_one = (
                position.move(CardinalDirection.SOUTH, 1)
                .move(CardinalDirection.WEST, 1)
                .move(CardinalDirection.UP, 1)
            )
            corner_two = (
                position.move(CardinalDirection.NORTH, 1)
                .move(CardinalDirection.EAST, 1)
                .move(CardinalDirection.UP, 4)
            )
            self.protect_fluids(corner_one, corner_two)

        # Need air so a rider fits if the track tunnels or crosses something
        self.clear_air_above(position, 1, HEADROOM)

        self.world.place(rail, position.move(CardinalDirection.UP, 1))
