"""
Track module - Roller-coaster track generation.

This module contains:
- CoasterGenerator: Composable track pieces driven through a Builder
- TrackConfiguration: Rail base, power interval, decoration and protection settings
- TrackStatistics: Running length and powered-rail counters
- RailPlacer: Single-rail placement, fluid protection and decoration
"""

from coasterbuilder.track.config import (
    DecorationStyle,
    PowerLevel,
    TrackConfiguration,
    VerticalDirection,
)
from coasterbuilder.track.generator import CoasterGenerator, plan_spiral_steps
from coasterbuilder.track.placement import RailPlacer
from coasterbuilder.track.statistics import TrackStatistics

__all__ = [
    "CoasterGenerator",
    "plan_spiral_steps",
    "DecorationStyle",
    "PowerLevel",
    "TrackConfiguration",
    "VerticalDirection",
    "RailPlacer",
    "TrackStatistics",
]
