"""
Track statistics - Running counters for built track.

A powered rail counts as two units of track length; plain rails count as
one. Rails placed only for shape (unpowered powered rails) are not counted.
"""

from dataclasses import dataclass

POWERED_RAIL_LENGTH = 2


@dataclass
class TrackStatistics:
    """Counters updated by the rail placement wrappers."""
    total_length: int = 0
    total_powered_rails: int = 0

    def record_rail(self) -> None:
        """Count one plain rail."""
        self.total_length += 1

    def record_powered_rail(self) -> None:
        """Count one powered rail."""
        self.total_length += POWERED_RAIL_LENGTH
        self.total_powered_rails += 1

    def reset(self) -> None:
        """Zero all counters."""
        self.total_length = 0
        self.total_powered_rails = 0

    def get_state(self) -> dict:
        return {
            "total_length": self.total_length,
            "total_powered_rails": self.total_powered_rails,
        }
