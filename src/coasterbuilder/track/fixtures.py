"""
Track fixtures - Boarding station and end buffer.

Defines:
- The boarding station: entry rails, ramp, back walls and a launch button
- The end buffer that stops carts at the end of the ride
"""

from typing import TYPE_CHECKING
import logging

from coasterbuilder.world.blocks import Block, Item
from coasterbuilder.world.position import CompassDirection, Position, RelativeDirection
from coasterbuilder.world.world import LOCAL_PLAYER

if TYPE_CHECKING:
    from coasterbuilder.track.generator import CoasterGenerator

logger = logging.getLogger(__name__)

FORWARD = RelativeDirection.FORWARD
BACK = RelativeDirection.BACK
LEFT = RelativeDirection.LEFT
RIGHT = RelativeDirection.RIGHT
UP = RelativeDirection.UP

# Station materials
BUTTON_BACKGROUND = Block.PINK_CONCRETE
WALL_BACKGROUND = Block.QUARTZ_BLOCK
RAMP_BLOCK = Block.QUARTZ_SLAB
BUTTON = Block.WARPED_BUTTON
WALL_HEIGHT = 4

# Button data value for the face it is mounted on
_BUTTON_FACING = {
    CompassDirection.NORTH: 5,
    CompassDirection.EAST: 3,
    CompassDirection.SOUTH: 4,
    CompassDirection.WEST: 2,
}


def button_facing_for(direction: CompassDirection) -> int:
    """Get the button data value for a station facing.

    Diagonal facings have no button orientation and map to 0.
    """
    return _BUTTON_FACING.get(direction, 0)


def place_track_start(
    generator: "CoasterGenerator",
    position: Position,
    direction: CompassDirection,
) -> None:
    """Build a boarding station and hand the player a minecart.

    Lays three entry rails from `position` along `direction`, a slab ramp
    to the right of them, walls behind and to the left, and a button that
    powers the entry rails. The builder ends one block past the third
    entry rail, level with the rails.

    Args:
        generator: CoasterGenerator to build with
        position: Position of the first entry rail
        direction: Direction the ride leaves the station
    """
    builder = generator.builder
    placer = generator.placer

    builder.teleport_to(position)
    builder.face(direction)

    # Rails
    placer.place_unpowered_powered_rail(builder.position)
    builder.move(FORWARD, 1)
    placer.place_unpowered_powered_rail(builder.position)
    builder.move(FORWARD, 1)
    generator.add_rail()

    # Ramp
    builder.move(RIGHT, 1)
    for step in range(3):
        if step:
            builder.move(BACK, 1)
        builder.place(RAMP_BLOCK)
        placer.clear_air_above(builder.position, 1, 3)

    # Wall behind the rails
    builder.move(BACK, 1)
    builder.mark()
    builder.move(LEFT, 1)
    builder.raise_wall(WALL_BACKGROUND, WALL_HEIGHT)

    # Button background: back wall, side wall and floor
    builder.move(LEFT, 1)
    builder.mark()
    builder.move(LEFT, 1)
    builder.raise_wall(BUTTON_BACKGROUND, WALL_HEIGHT)
    builder.mark()
    builder.move(FORWARD, 3)
    builder.raise_wall(BUTTON_BACKGROUND, WALL_HEIGHT)
    builder.move(RIGHT, 1)
    for step in range(3):
        if step:
            builder.move(BACK, 1)
        builder.place(BUTTON_BACKGROUND)
        placer.clear_air_above(builder.position, 1, 3)

    # Button on a redstone wire
    builder.move(UP, 1)
    builder.place(Block.REDSTONE_WIRE)
    builder.move(UP, 1)
    builder.place(BUTTON, button_facing_for(direction))

    generator.world.give(LOCAL_PLAYER, Item.MINECART, 1)

    # Next piece attaches after the third entry rail
    builder.shift(3, -2, -1)
    logger.debug("Station built at %s facing %s", position.as_tuple(), direction.value)


def place_track_end(generator: "CoasterGenerator") -> None:
    """Finish the track with a rail and a two-block buffer in front of it.

    The builder ends two blocks past the closing rail, level with it.

    Args:
        generator: CoasterGenerator to build with
    """
    builder = generator.builder
    rail_base = generator.config.rail_base

    generator.add_rail()
    builder.move(FORWARD, 1)
    builder.place(rail_base)
    builder.move(UP, 1)
    builder.place(rail_base)
    builder.shift(1, -1, 0)
