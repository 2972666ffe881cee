"""
Position - Block coordinates and directions.

Defines:
- Position: immutable integer block coordinate
- CardinalDirection: absolute axis directions (including up/down)
- CompassDirection: 8-point horizontal facing
- TurnDirection / RelativeDirection: directions relative to a facing

Axis convention: East = +x, Up = +y, South = +z.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import numpy as np

from coasterbuilder.errors import InvalidParameterError


class CardinalDirection(Enum):
    """Absolute directions along the world axes."""
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    UP = "up"
    DOWN = "down"

    @property
    def vector(self) -> np.ndarray:
        """Unit vector (x, y, z) for this direction."""
        return np.array(_CARDINAL_VECTORS[self], dtype=int)


_CARDINAL_VECTORS = {
    CardinalDirection.NORTH: (0, 0, -1),
    CardinalDirection.EAST: (1, 0, 0),
    CardinalDirection.SOUTH: (0, 0, 1),
    CardinalDirection.WEST: (-1, 0, 0),
    CardinalDirection.UP: (0, 1, 0),
    CardinalDirection.DOWN: (0, -1, 0),
}


class CompassDirection(Enum):
    """8-point horizontal compass direction, in clockwise order."""
    NORTH = "north"
    NORTH_EAST = "north_east"
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    WEST = "west"
    NORTH_WEST = "north_west"

    @property
    def vector(self) -> np.ndarray:
        """Horizontal step (x, y, z) for one block of travel in this direction."""
        return np.array(_COMPASS_VECTORS[self], dtype=int)

    @property
    def is_diagonal(self) -> bool:
        """True for the four intercardinal directions."""
        return _COMPASS_ORDER.index(self) % 2 == 1

    def rotated(self, steps: int) -> "CompassDirection":
        """Rotate clockwise by 45 degree steps (negative = counter-clockwise).

        Args:
            steps: Number of 45 degree steps

        Returns:
            Rotated direction
        """
        index = (_COMPASS_ORDER.index(self) + steps) % len(_COMPASS_ORDER)
        return _COMPASS_ORDER[index]

    def turned(self, direction: "TurnDirection") -> "CompassDirection":
        """Direction after a 90 degree turn."""
        return self.rotated(2 if direction == TurnDirection.RIGHT else -2)

    @property
    def opposite(self) -> "CompassDirection":
        return self.rotated(4)


_COMPASS_ORDER = list(CompassDirection)

_COMPASS_VECTORS = {
    CompassDirection.NORTH: (0, 0, -1),
    CompassDirection.NORTH_EAST: (1, 0, -1),
    CompassDirection.EAST: (1, 0, 0),
    CompassDirection.SOUTH_EAST: (1, 0, 1),
    CompassDirection.SOUTH: (0, 0, 1),
    CompassDirection.SOUTH_WEST: (-1, 0, 1),
    CompassDirection.WEST: (-1, 0, 0),
    CompassDirection.NORTH_WEST: (-1, 0, -1),
}


class TurnDirection(Enum):
    """Horizontal 90 degree turn relative to the current facing."""
    LEFT = "left"
    RIGHT = "right"


class RelativeDirection(Enum):
    """Movement direction relative to the builder's facing."""
    FORWARD = "forward"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def vector_for(self, facing: CompassDirection) -> np.ndarray:
        """Resolve to an absolute step vector for the given facing.

        Args:
            facing: Current facing of the builder

        Returns:
            Step vector (x, y, z)
        """
        if self == RelativeDirection.FORWARD:
            return facing.vector
        if self == RelativeDirection.BACK:
            return facing.opposite.vector
        if self == RelativeDirection.LEFT:
            return facing.turned(TurnDirection.LEFT).vector
        if self == RelativeDirection.RIGHT:
            return facing.turned(TurnDirection.RIGHT).vector
        if self == RelativeDirection.UP:
            return CardinalDirection.UP.vector
        return CardinalDirection.DOWN.vector


@dataclass(frozen=True)
class Position:
    """Immutable block coordinate.

    All movement helpers return a new Position; a Position is never
    modified in place and compares equal by coordinates alone.
    """
    x: int = 0
    y: int = 0
    z: int = 0

    @classmethod
    def from_array(cls, values) -> "Position":
        """Build a position from any 3-element sequence or numpy array.

        Raises:
            InvalidParameterError: If a value is not a whole number
        """
        array = np.asarray(values)
        if not np.array_equal(array, np.floor(array)):
            raise InvalidParameterError(
                f"Block coordinates must be whole numbers, got {array.tolist()}"
            )
        x, y, z = (int(v) for v in array)
        return cls(x, y, z)

    def as_array(self) -> np.ndarray:
        """Coordinates as a numpy vector."""
        return np.array([self.x, self.y, self.z])

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def move(self, direction: CardinalDirection, distance: int = 1) -> "Position":
        """Get the position `distance` blocks away in a cardinal direction.

        Args:
            direction: Direction of travel
            distance: Number of blocks (negative moves the other way)

        Returns:
            New position
        """
        return Position.from_array(self.as_array() + direction.vector * distance)
