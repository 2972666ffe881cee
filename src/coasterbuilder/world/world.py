"""
World - In-memory block world the track builder writes into.

Manages:
- Sparse block storage (unset cells read as air)
- Single-block and bulk box operations
- Player inventories for handed-out items
- Per-operation call counters
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple
import logging
import numpy as np

from coasterbuilder.errors import WorldMutationError
from coasterbuilder.world.blocks import Block, FillMode, Item
from coasterbuilder.world.position import Position

logger = logging.getLogger(__name__)

LOCAL_PLAYER = "local_player"


@dataclass
class WorldLimits:
    """Vertical build limits of the world."""
    min_y: int = -64
    max_y: int = 319


class BlockWorld:
    """Sparse voxel world.

    Stores only non-air blocks. Every write is visible to the next read,
    which the builder relies on for its "only if currently air" checks.

    Features:
    - place/test single cells
    - replace/fill axis-aligned boxes
    - give items to named players
    - operation_counts for inspecting how the world was driven

    Usage:
        world = BlockWorld()
        world.place(Block.STONE, Position(0, 64, 0))
        world.test(Block.STONE, Position(0, 64, 0))  # True
    """

    def __init__(self, limits: WorldLimits | None = None):
        """Initialize an empty world.

        Args:
            limits: Vertical build limits. Uses defaults if None.
        """
        self.limits = limits or WorldLimits()

        self._blocks: Dict[Position, Block] = {}
        self._data: Dict[Position, int] = {}
        self._inventories: Dict[str, Counter] = {}

        self.operation_counts: Counter = Counter()

    @property
    def block_count(self) -> int:
        """Number of non-air blocks in the world."""
        return len(self._blocks)

    def get_block(self, position: Position) -> Block:
        """Get the block at a position (AIR if unset)."""
        return self._blocks.get(position, Block.AIR)

    def get_data(self, position: Position) -> int:
        """Get the data value stored with the block at a position."""
        return self._data.get(position, 0)

    def test(self, block: Block, position: Position) -> bool:
        """Check whether the block at a position is `block`.

        Args:
            block: Expected block
            position: Cell to check

        Returns:
            True if the cell holds that block
        """
        self.operation_counts["test"] += 1
        return self.get_block(position) == block

    def place(self, block: Block, position: Position, data: int = 0) -> None:
        """Set a single cell unconditionally.

        Args:
            block: Block to place
            position: Target cell
            data: Extra block data (e.g. button facing)

        Raises:
            WorldMutationError: If the cell lies outside the build limits
                or is not a whole-block cell
        """
        self.check_in_bounds(position)
        self.operation_counts["place"] += 1
        self._set(position, block, data)

    def replace(
        self,
        target: Block,
        source: Block,
        corner_one: Position,
        corner_two: Position,
    ) -> int:
        """Replace every `source` block inside a box with `target`.

        Args:
            target: Block to write
            source: Block to look for
            corner_one: One corner of the box
            corner_two: Opposite corner of the box

        Returns:
            Number of cells replaced

        Raises:
            WorldMutationError: If a corner is not a whole-block cell
        """
        self.operation_counts["replace"] += 1
        replaced = 0
        for position in self._iter_box(corner_one, corner_two):
            if self.get_block(position) == source:
                self._set(position, target)
                replaced += 1
        return replaced

    def fill(
        self,
        block: Block,
        corner_one: Position,
        corner_two: Position,
        mode: FillMode = FillMode.REPLACE,
    ) -> int:
        """Fill a box with a block.

        Args:
            block: Block to write
            corner_one: One corner of the box
            corner_two: Opposite corner of the box
            mode: REPLACE overwrites everything, KEEP only fills air

        Returns:
            Number of cells written

        Raises:
            WorldMutationError: If the box reaches outside the build limits
                or a corner is not a whole-block cell
        """
        self.check_in_bounds(corner_one)
        self.check_in_bounds(corner_two)
        self.operation_counts["fill"] += 1

        written = 0
        for position in self._iter_box(corner_one, corner_two):
            if mode == FillMode.KEEP and self.get_block(position) != Block.AIR:
                continue
            self._set(position, block)
            written += 1
        return written

    def give(self, target: str, item: Item, count: int = 1) -> None:
        """Hand items to a player.

        Args:
            target: Player name
            item: Item to give
            count: Number of items
        """
        self.operation_counts["give"] += 1
        inventory = self._inventories.setdefault(target, Counter())
        inventory[item] += count
        logger.debug("Gave %d x %s to %s", count, item.value, target)

    def inventory_of(self, target: str) -> Dict[Item, int]:
        """Get a copy of a player's inventory."""
        return dict(self._inventories.get(target, {}))

    def find(self, block: Block) -> List[Position]:
        """Get all positions holding a block, sorted by coordinates.

        Args:
            block: Block to search for (AIR is not searchable)

        Returns:
            List of positions
        """
        return sorted(
            (pos for pos, b in self._blocks.items() if b == block),
            key=Position.as_tuple,
        )

    def count(self, block: Block) -> int:
        """Number of cells holding a block."""
        return sum(1 for b in self._blocks.values() if b == block)

    def reset_counts(self) -> None:
        """Clear the operation counters."""
        self.operation_counts.clear()

    def _set(self, position: Position, block: Block, data: int = 0) -> None:
        if block == Block.AIR:
            self._blocks.pop(position, None)
            self._data.pop(position, None)
            return
        self._blocks[position] = block
        if data:
            self._data[position] = data
        else:
            self._data.pop(position, None)

    def check_in_bounds(self, position: Position) -> None:
        """Check that a position is a whole-block cell inside the build limits.

        Raises:
            WorldMutationError: If the position is missing, has a
                non-integer coordinate or lies outside the vertical limits
        """
        self._check_coordinates(position)
        if not self.limits.min_y <= position.y <= self.limits.max_y:
            raise WorldMutationError(
                f"Position {position.as_tuple()} is outside build limits "
                f"[{self.limits.min_y}, {self.limits.max_y}]"
            )

    @staticmethod
    def _check_coordinates(position: Position) -> None:
        if position is None:
            raise WorldMutationError("Missing position for world operation")
        for value in position.as_tuple():
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise WorldMutationError(
                    f"Position {position.as_tuple()} has a non-integer coordinate"
                )

    @staticmethod
    def _box_bounds(
        corner_one: Position,
        corner_two: Position,
    ) -> Tuple[np.ndarray, np.ndarray]:
        a = corner_one.as_array()
        b = corner_two.as_array()
        return np.minimum(a, b), np.maximum(a, b)

    def _iter_box(self, corner_one: Position, corner_two: Position) -> Iterator[Position]:
        if corner_one is None or corner_two is None:
            raise WorldMutationError("Box operations need two corners")
        self._check_coordinates(corner_one)
        self._check_coordinates(corner_two)
        low, high = self._box_bounds(corner_one, corner_two)
        for offset in np.ndindex(*(high - low + 1)):
            yield Position.from_array(low + np.array(offset))
