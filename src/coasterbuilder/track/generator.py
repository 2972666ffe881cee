"""
Coaster generator - Composable roller-coaster track pieces.

Generates:
- Straight sections with configurable power
- Ramps up and down
- Turns, banked turns and U-turns
- Spirals
- Free-fall drops with a landing ramp
- Station fixtures at the start and end of a ride

Every piece starts at the builder's current position and leaves the
builder where the next piece should begin.
"""

from dataclasses import replace
from typing import List
import logging

from coasterbuilder.errors import (
    DegenerateGeometryError,
    InvalidParameterError,
    require_member,
    require_range,
)
from coasterbuilder.track.config import (
    DecorationStyle,
    PowerLevel,
    TrackConfiguration,
    VerticalDirection,
)
from coasterbuilder.track.fixtures import place_track_end, place_track_start
from coasterbuilder.track.placement import RailPlacer
from coasterbuilder.track.statistics import TrackStatistics
from coasterbuilder.world.blocks import Block, FillMode
from coasterbuilder.world.builder import Builder
from coasterbuilder.world.position import (
    CardinalDirection,
    CompassDirection,
    Position,
    RelativeDirection,
    TurnDirection,
)

logger = logging.getLogger(__name__)

FORWARD = RelativeDirection.FORWARD
BACK = RelativeDirection.BACK
UP = RelativeDirection.UP
DOWN = RelativeDirection.DOWN

# Ramps going up put a powered rail down after this many unpowered ones
RAMP_UP_POWER_CADENCE = 8

MIN_BANK_HEIGHT = 1
MAX_BANK_HEIGHT = 5
LONG_BANK_HEIGHT = 3  # Banks higher than this get an extra powered rail

MIN_U_TURN_WIDTH = 4
MIN_SPIRAL_WIDTH = 3

MIN_FREE_FALL_HEIGHT = 4
# A drop of height h writes h + 3 layers, from h below the start up to the
# top of the safety wall, so the default 384-layer world fits at most 381.
# Taller drops pass validation and then fail the build-limit check.
MAX_FREE_FALL_HEIGHT = 384
FREE_FALL_WALL_HEIGHT = 2


def plan_spiral_steps(
    vertical_direction: VerticalDirection,
    height: int,
    width: int,
) -> List[int]:
    """Split a spiral's height into per-ramp steps.

    The first upward ramp climbs `width - 1`; every other ramp changes by
    `width - 2` since it shares its first block with the previous turn.
    The last step is clipped so the total is exactly `height`.

    Args:
        vertical_direction: Whether the spiral climbs or descends
        height: Total height change
        width: Side length of the spiral

    Returns:
        List of height changes, one per ramp

    Raises:
        DegenerateGeometryError: If a step would not change the height
    """
    steps = []
    total = 0
    while total < height:
        if vertical_direction == VerticalDirection.UP and total == 0:
            step = width - 1
        else:
            step = width - 2
        if total + step > height:
            step = height - total

        if step <= 0:
            raise DegenerateGeometryError(
                f"Spiral of width {width} cannot change height "
                f"(step {step} after {total} of {height})"
            )
        steps.append(step)
        total += step
    return steps


class CoasterGenerator:
    """Roller-coaster track generator.

    Owns the configuration and statistics for one track and drives a
    Builder through the world. Pieces are added by calling the add_*
    methods in sequence; each one validates its arguments before touching
    the world.

    Usage:
        world = BlockWorld()
        generator = CoasterGenerator(Builder(world, Position(0, 64, 0)))
        generator.add_straight_line(10)
        generator.add_turn(TurnDirection.LEFT)
        generator.add_ramp(VerticalDirection.UP, 4)
    """

    def __init__(
        self,
        builder: Builder,
        config: TrackConfiguration | None = None,
    ):
        """Initialize generator.

        Args:
            builder: Cursor to build with (owned by the caller)
            config: Track configuration. Uses defaults if None.
        """
        self.builder = builder
        self.world = builder.world
        self.config = config or TrackConfiguration()
        self.statistics = TrackStatistics()
        self.placer = RailPlacer(self.world, self.config)

    # ------------------------------------------------------------------
    # Single rails
    # ------------------------------------------------------------------

    def add_rail(self) -> None:
        """Place a plain rail at the builder and count it."""
        self.placer.place_rail(self.builder.position)
        self.statistics.record_rail()

    def add_powered_rail(self) -> None:
        """Place a powered rail at the builder and count it (two length units)."""
        self.placer.place_powered_rail(self.builder.position)
        self.statistics.record_powered_rail()

    def _add_unpowered_powered_rail(self) -> None:
        # Shape-only powered rail; deliberately left out of the statistics
        self.placer.place_unpowered_powered_rail(self.builder.position)

    def place_decoration(self, position: Position | None = None) -> None:
        """Decorate beside a rail (defaults to the builder's position)."""
        self.placer.place_decoration(position or self.builder.position)

    # ------------------------------------------------------------------
    # Straight sections
    # ------------------------------------------------------------------

    def add_straight_line(self, length: int, power_level: PowerLevel = PowerLevel.NORMAL) -> None:
        """Lay a straight run of rails.

        With power, every `power_interval`-th rail (starting with the
        first) is powered. FULL fills the gaps with unpowered powered rail
        blocks, otherwise the gaps get plain rails.

        Args:
            length: Number of rails
            power_level: How densely to power the run
        """
        require_range("length", length, 0)
        require_member("power_level", power_level, PowerLevel)

        for index in range(length):
            if power_level != PowerLevel.NO and index % self.config.power_interval == 0:
                self.add_powered_rail()
            elif power_level == PowerLevel.FULL:
                self._add_unpowered_powered_rail()
            else:
                self.add_rail()
            self.builder.move(FORWARD, 1)

        self._log_segment("straight", length=length, power=power_level.value)

    def add_speed_boost(self, count: int) -> None:
        """Lay a run of powered rails and decorate its end.

        Args:
            count: Number of powered rails
        """
        require_range("count", count, 0)

        last_rail = None
        for _ in range(count):
            last_rail = self.builder.position
            self.add_powered_rail()
            self.builder.move(FORWARD, 1)

        if last_rail is not None:
            self.placer.place_decoration(last_rail)

        self._log_segment("speed_boost", count=count)

    # ------------------------------------------------------------------
    # Ramps
    # ------------------------------------------------------------------

    def add_ramp(
        self,
        direction: VerticalDirection,
        distance: int,
        horiz_space: int = 1,
    ) -> None:
        """Lay a ramp.

        The ramp has `distance + 1` levels of `horiz_space` rails each and
        changes height by exactly `distance`. The builder ends one block
        past the last rail, level with it.

        Args:
            direction: Up or down
            distance: Height change in blocks
            horiz_space: Rails per level (higher = gentler slope)
        """
        require_member("direction", direction, VerticalDirection)
        require_range("distance", distance, 0)
        require_range("horiz_space", horiz_space, 1)

        if direction == VerticalDirection.UP:
            self._ramp_up(distance, horiz_space)
        else:
            self._ramp_down(distance, horiz_space)

        self._log_segment(
            "ramp", direction=direction.value, distance=distance, horiz_space=horiz_space,
        )

    def _ramp_up(self, height: int, horiz_space: int) -> None:
        unpowered_placed = RAMP_UP_POWER_CADENCE  # First rail is powered
        for _ in range(height + 1):
            for _ in range(horiz_space):
                if unpowered_placed >= RAMP_UP_POWER_CADENCE:
                    self.add_powered_rail()
                    unpowered_placed = 0
                else:
                    self._add_unpowered_powered_rail()
                    unpowered_placed += 1
                self.builder.move(FORWARD, 1)
            self.builder.move(UP, 1)

        # The last level's climb has no rail on it
        self.builder.move(DOWN, 1)

    def _ramp_down(self, descent: int, horiz_space: int) -> None:
        interval = self.config.power_interval
        for level in range(descent + 1):
            # Only the first level needs a boost at its start; the rest
            # pick up speed going downhill.
            power_at_start = level == 0 and horiz_space >= interval
            offset = 0 if power_at_start else 1
            for horiz in range(horiz_space):
                if (horiz + offset) % interval == 0:
                    self.add_powered_rail()
                else:
                    self.add_rail()
                self.builder.move(FORWARD, 1)
            self.builder.move(DOWN, 1)

        # The last level's descent has no rail on it
        self.builder.move(UP, 1)

    # ------------------------------------------------------------------
    # Turns
    # ------------------------------------------------------------------

    def add_turn(self, direction: TurnDirection) -> None:
        """Lay a three-rail 90 degree turn.

        The builder ends facing the new direction, one block past the
        third rail.

        Args:
            direction: Left or right
        """
        require_member("direction", direction, TurnDirection)

        self.add_rail()
        self.builder.move(FORWARD, 1)
        self.add_rail()
        self.builder.turn(direction)
        self.builder.move(FORWARD, 1)
        self.add_rail()
        self.builder.move(FORWARD, 1)

        self._log_segment("turn", direction=direction.value)

    def add_banked_turn(self, direction: TurnDirection, bank_height: int = 2) -> None:
        """Climb into a turn and descend back to the starting level.

        Args:
            direction: Left or right
            bank_height: Blocks to climb before the turn (1-5)
        """
        require_member("direction", direction, TurnDirection)
        require_range("bank_height", bank_height, MIN_BANK_HEIGHT, MAX_BANK_HEIGHT)

        self.add_ramp(VerticalDirection.UP, bank_height, 1)
        self.add_turn(direction)
        self.add_ramp(VerticalDirection.DOWN, bank_height, 1)

        # Longer banks lose more momentum
        if bank_height > LONG_BANK_HEIGHT:
            self.add_powered_rail()
            self.builder.move(FORWARD, 1)

        self._log_segment("banked_turn", direction=direction.value, bank_height=bank_height)

    def add_u_turn(
        self,
        direction: TurnDirection,
        width: int = 5,
        power_level: PowerLevel = PowerLevel.NORMAL,
    ) -> None:
        """Lay a 180 degree turn made of two same-direction turns.

        Args:
            direction: Left or right (both turns go this way)
            width: Distance across the U, at least 4
            power_level: Power on the connecting segment
        """
        require_member("direction", direction, TurnDirection)
        require_range("width", width, MIN_U_TURN_WIDTH)
        require_member("power_level", power_level, PowerLevel)

        full_power = power_level == PowerLevel.FULL

        # First turn
        self.add_rail()
        self.builder.move(FORWARD, 1)
        self.add_rail()
        self.builder.turn(direction)
        self.builder.move(FORWARD, 1)

        # Connecting segment, minus the turn rails at each end
        for i in range(width - 2):
            if power_level != PowerLevel.NO and (full_power or i % self.config.power_interval == 0):
                self.add_powered_rail()
            else:
                self.add_rail()
            self.builder.move(FORWARD, 1)

        # Second turn
        self.add_rail()
        self.builder.turn(direction)
        self.builder.move(FORWARD, 1)
        if full_power:
            self.add_powered_rail()
        else:
            self.add_rail()
        self.builder.move(FORWARD, 1)

        self._log_segment(
            "u_turn", direction=direction.value, width=width, power=power_level.value,
        )

    # ------------------------------------------------------------------
    # Spirals and drops
    # ------------------------------------------------------------------

    def add_spiral(
        self,
        vertical_direction: VerticalDirection,
        turn_direction: TurnDirection,
        height: int = 10,
        width: int = 3,
    ) -> None:
        """Climb or descend in a square spiral.

        Ramps alternate with turns until the height is reached; the track
        continues straight after the last ramp.

        Args:
            vertical_direction: Up or down
            turn_direction: Direction of every turn
            height: Total height change
            width: Side length of the spiral, at least 3

        Raises:
            DegenerateGeometryError: If the spiral cannot make progress
        """
        require_member("vertical_direction", vertical_direction, VerticalDirection)
        require_member("turn_direction", turn_direction, TurnDirection)
        require_range("height", height, 1)
        require_range("width", width, MIN_SPIRAL_WIDTH)

        steps = plan_spiral_steps(vertical_direction, height, width)
        going_up = vertical_direction == VerticalDirection.UP

        for index, step in enumerate(steps):
            self.add_ramp(vertical_direction, step, 1)

            if going_up:
                # A powered rail can't curve, so the last one becomes plain
                self.builder.move(BACK, 1)
                self.add_rail()

            if index < len(steps) - 1:
                self.builder.turn(turn_direction)

            if going_up:
                self.builder.move(FORWARD, 1)

        self._log_segment(
            "spiral",
            direction=vertical_direction.value,
            turn=turn_direction.value,
            height=height,
            width=width,
        )

    def add_free_fall(self, height: int) -> None:
        """Drop the cart down a cleared shaft onto a landing ramp.

        The builder ends on the last landing rail. The drop needs
        `height + 3` layers of the world; if they do not fit inside the
        build limits nothing is built and the builder does not move.

        Args:
            height: Depth of the drop (4-384)

        Raises:
            WorldMutationError: If the shaft or landing would leave the
                build limits
        """
        require_range("height", height, MIN_FREE_FALL_HEIGHT, MAX_FREE_FALL_HEIGHT)

        builder = self.builder
        start = builder.position
        corner_one = None
        corner_two = None

        self.world.check_in_bounds(start.move(CardinalDirection.UP, FREE_FALL_WALL_HEIGHT))
        self.world.check_in_bounds(start.move(CardinalDirection.DOWN, height))

        builder.move(UP, FREE_FALL_WALL_HEIGHT)
        builder.mark()

        if self.config.protects_fluids:
            builder.shift(-1, 1, 1)
            corner_one = builder.position
            builder.shift(1, -1, -1)

        builder.shift(2, -height - 2, 0)

        if self.config.protects_fluids:
            builder.shift(1, -1, -1)
            corner_two = builder.position
            builder.shift(-1, 1, 1)
            self.placer.protect_fluids(corner_one, corner_two)

        builder.fill(Block.AIR)
        builder.teleport_to(start)

        # Wall stops the cart rolling on once it leaves the track
        self.add_rail()
        builder.move(FORWARD, 2)
        builder.mark()
        builder.move(UP, FREE_FALL_WALL_HEIGHT)
        builder.fill(self.config.rail_base, FillMode.KEEP)

        # Short ramp at the bottom to get moving again
        builder.move(BACK, 2)
        builder.move(DOWN, height)
        self._add_unpowered_powered_rail()
        builder.move(FORWARD, 1)
        builder.move(DOWN, 1)
        self.add_powered_rail()
        builder.move(FORWARD, 1)
        builder.move(DOWN, 1)
        self._add_unpowered_powered_rail()

        self._log_segment("free_fall", height=height)

    # ------------------------------------------------------------------
    # Fixtures
    # ------------------------------------------------------------------

    def place_track_start(self, position: Position, direction: CompassDirection) -> None:
        """Build the boarding station at `position` facing `direction`."""
        if not isinstance(position, Position):
            raise InvalidParameterError(f"position must be a Position, got {position!r}")
        require_member("direction", direction, CompassDirection)

        place_track_start(self, position, direction)
        self._log_segment("track_start", direction=direction.value)

    def place_track_end(self) -> None:
        """Cap the track with a buffer."""
        place_track_end(self)
        self._log_segment("track_end")

    # ------------------------------------------------------------------
    # Configuration and statistics
    # ------------------------------------------------------------------

    def set_rail_base(self, block: Block) -> None:
        """Set the block laid under plain rails."""
        self._update_config(rail_base=block)

    def set_power_interval(self, interval: int = 5) -> None:
        """Set the spacing of powered rails on normally powered sections (1-8)."""
        self._update_config(power_interval=interval)

    def set_water_protection(self, value: bool) -> None:
        self._update_config(water_protection=bool(value))

    def set_lava_protection(self, value: bool) -> None:
        self._update_config(lava_protection=bool(value))

    def set_decoration_style(self, style: DecorationStyle) -> None:
        self._update_config(decoration_style=style)

    def set_debug_mode(self, enable: bool) -> None:
        self._update_config(debug_mode=bool(enable))

    def get_total_track_length(self) -> int:
        """Total track length (powered rails count double)."""
        return self.statistics.total_length

    def get_total_powered_rails(self) -> int:
        """Number of counted powered rails."""
        return self.statistics.total_powered_rails

    def reset_track_statistics(self) -> None:
        """Zero the track statistics."""
        self.statistics.reset()

    def get_state(self) -> dict:
        """Get generator state for display.

        Returns:
            Dictionary with cursor, configuration and statistics
        """
        return {
            "position": self.builder.position.as_tuple(),
            "facing": self.builder.facing.value,
            "config": self.config.get_state(),
            "statistics": self.statistics.get_state(),
        }

    def _update_config(self, **changes) -> None:
        # Validate on a candidate first so a bad value leaves the old config intact
        candidate = replace(self.config, **changes)
        for name, value in changes.items():
            setattr(self.config, name, getattr(candidate, name))
        logger.debug("Configuration updated: %s", changes)

    def _log_segment(self, name: str, **params) -> None:
        logger.debug("Added %s %s", name, params)
        if self.config.debug_mode:
            logger.info(
                "%s %s -> at %s facing %s, length %d",
                name,
                params,
                self.builder.position.as_tuple(),
                self.builder.facing.value,
                self.statistics.total_length,
            )
