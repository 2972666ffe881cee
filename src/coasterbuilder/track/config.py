"""
Track configuration - Settings every track generator reads.

Defines:
- PowerLevel, VerticalDirection, DecorationStyle enumerations
- TrackConfiguration: validated generator settings
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from coasterbuilder.errors import InvalidParameterError, require_member, require_range
from coasterbuilder.world.blocks import Block, Fluid


MIN_POWER_INTERVAL = 1
MAX_POWER_INTERVAL = 8  # Longer gaps let minecarts stall between powered rails


class PowerLevel(Enum):
    """How densely a section is powered."""
    FULL = "full"        # Powered rail blocks throughout
    NORMAL = "normal"    # Powered rail every power_interval rails
    NO = "no"            # Plain rails only


class VerticalDirection(Enum):
    """Direction of a ramp or spiral."""
    UP = "up"
    DOWN = "down"


class DecorationStyle(Enum):
    """Lighting placed beside the track."""
    NONE = "none"
    TORCHES = "torches"
    LANTERNS = "lanterns"
    GLOWSTONE = "glowstone"

    @property
    def block(self) -> Optional[Block]:
        """Block used for this style (None for NONE)."""
        return _DECORATION_BLOCKS.get(self)


_DECORATION_BLOCKS = {
    DecorationStyle.TORCHES: Block.TORCH,
    DecorationStyle.LANTERNS: Block.LANTERN,
    DecorationStyle.GLOWSTONE: Block.GLOWSTONE,
}


@dataclass
class TrackConfiguration:
    """Settings shared by all generators of one CoasterGenerator."""
    # Block laid under plain rails and used as filler
    rail_base: Block = Block.OAK_PLANKS

    # Rails between powered rails on a normally powered straight
    power_interval: int = 5

    decoration_style: DecorationStyle = DecorationStyle.NONE

    # Replace fluids with glass around new track (can be disabled for perf)
    water_protection: bool = True
    lava_protection: bool = True

    debug_mode: bool = False

    def __post_init__(self):
        """Validate configuration."""
        require_range(
            "power_interval", self.power_interval,
            MIN_POWER_INTERVAL, MAX_POWER_INTERVAL,
        )
        require_member("rail_base", self.rail_base, Block)
        if self.rail_base == Block.AIR:
            raise InvalidParameterError("rail_base cannot be air")
        require_member("decoration_style", self.decoration_style, DecorationStyle)

    @property
    def protects_fluids(self) -> bool:
        """True if any fluid protection is enabled."""
        return self.water_protection or self.lava_protection

    @property
    def protected_fluids(self) -> tuple:
        """Fluids swept out of the way when laying track."""
        fluids = []
        if self.water_protection:
            fluids.append(Fluid.WATER)
        if self.lava_protection:
            fluids.append(Fluid.LAVA)
        return tuple(fluids)

    @property
    def decoration_block(self) -> Optional[Block]:
        """Block used for decoration (None when decoration is off)."""
        return self.decoration_style.block

    def get_state(self) -> dict:
        """Get configuration for display.

        Returns:
            Dictionary of settings
        """
        return {
            "rail_base": self.rail_base.value,
            "power_interval": self.power_interval,
            "decoration_style": self.decoration_style.value,
            "water_protection": self.water_protection,
            "lava_protection": self.lava_protection,
            "debug_mode": self.debug_mode,
        }
