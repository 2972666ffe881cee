"""
Builder - Movable write head used to lay out track.

Provides:
- Position and facing state
- Relative movement, turning, teleporting
- Mark-based box fills and walls
"""

from typing import Optional
import numpy as np

from coasterbuilder.world.blocks import Block, FillMode
from coasterbuilder.world.position import (
    CompassDirection,
    Position,
    RelativeDirection,
    TurnDirection,
)
from coasterbuilder.world.world import BlockWorld


class Builder:
    """Cursor with a position and a facing inside a BlockWorld.

    Relative moves are resolved against the current facing, so the same
    sequence of calls produces the same shape whichever way the builder
    faces.

    Usage:
        builder = Builder(world, Position(0, 64, 0), CompassDirection.NORTH)
        builder.move(RelativeDirection.FORWARD, 3)
        builder.turn(TurnDirection.LEFT)
    """

    def __init__(
        self,
        world: BlockWorld,
        position: Position | None = None,
        facing: CompassDirection = CompassDirection.NORTH,
    ):
        """Initialize builder.

        Args:
            world: World the builder writes into
            position: Starting position (origin if None)
            facing: Starting facing
        """
        self.world = world
        self._position = position or Position()
        self._facing = facing
        self._mark: Optional[Position] = None

    @property
    def position(self) -> Position:
        """Current position."""
        return self._position

    @property
    def facing(self) -> CompassDirection:
        """Current facing."""
        return self._facing

    @property
    def marked(self) -> Optional[Position]:
        """Position stored by the last mark() call."""
        return self._mark

    def move(self, direction: RelativeDirection, distance: int = 1) -> None:
        """Move relative to the current facing.

        Args:
            direction: Relative direction
            distance: Number of blocks
        """
        step = direction.vector_for(self._facing)
        self._position = Position.from_array(self._position.as_array() + step * distance)

    def turn(self, direction: TurnDirection) -> None:
        """Rotate the facing 90 degrees."""
        self._facing = self._facing.turned(direction)

    def face(self, direction: CompassDirection) -> None:
        """Set the facing."""
        self._facing = direction

    def teleport_to(self, position: Position) -> None:
        """Jump to a position, keeping the facing."""
        self._position = position

    def shift(self, forward: int = 0, up: int = 0, left: int = 0) -> None:
        """Move by offsets along the builder's own axes.

        Args:
            forward: Blocks forward (negative = back)
            up: Blocks up (negative = down)
            left: Blocks to the left (negative = right)
        """
        offset = (
            RelativeDirection.FORWARD.vector_for(self._facing) * forward
            + RelativeDirection.UP.vector_for(self._facing) * up
            + RelativeDirection.LEFT.vector_for(self._facing) * left
        )
        self._position = Position.from_array(self._position.as_array() + offset)

    def mark(self) -> None:
        """Remember the current position as one corner for fill/raise_wall."""
        self._mark = self._position

    def place(self, block: Block, data: int = 0) -> None:
        """Place a block at the current position."""
        self.world.place(block, self._position, data)

    def fill(self, block: Block, mode: FillMode = FillMode.REPLACE) -> int:
        """Fill the box between the mark and the current position.

        Args:
            block: Block to fill with
            mode: Fill mode

        Returns:
            Number of cells written
        """
        return self.world.fill(block, self._require_mark(), self._position, mode)

    def raise_wall(self, block: Block, height: int) -> int:
        """Build a wall from the mark to the current position.

        Args:
            block: Wall material
            height: Wall height in blocks, counted from the lower of the two ends

        Returns:
            Number of cells written
        """
        mark = self._require_mark()
        base_y = min(mark.y, self._position.y)
        top = np.array([self._position.x, base_y + height - 1, self._position.z])
        bottom = Position(mark.x, base_y, mark.z)
        return self.world.fill(block, bottom, Position.from_array(top))

    def _require_mark(self) -> Position:
        if self._mark is None:
            raise RuntimeError("No mark set. Call mark() first.")
        return self._mark
