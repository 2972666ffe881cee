#!/usr/bin/env python3
"""
Roller Coaster Example

This example demonstrates how to:
1. Build a boarding station and hand out a minecart
2. Chain straights, ramps, turns and a spiral into one ride
3. Add a free-fall drop with a landing ramp
4. Inspect the resulting track statistics and world

Run with: python build_coaster.py [--debug]
"""

import argparse
import logging

from coasterbuilder import BlockWorld, Builder, CoasterGenerator
from coasterbuilder.track import DecorationStyle, PowerLevel, TrackConfiguration, VerticalDirection
from coasterbuilder.world import Block, CompassDirection, Position, TurnDirection


def build_simple_loop(generator: CoasterGenerator) -> None:
    """Station, straight, a couple of turns and back."""
    print("=" * 60)
    print("1. Simple Loop")
    print("=" * 60)

    generator.place_track_start(Position(0, 64, 0), CompassDirection.NORTH)
    generator.add_straight_line(10)
    generator.add_turn(TurnDirection.RIGHT)
    generator.add_straight_line(6)
    generator.add_u_turn(TurnDirection.RIGHT, width=6, power_level=PowerLevel.NORMAL)
    generator.add_straight_line(6)

    print(f"\nCursor: {generator.builder.position.as_tuple()} facing {generator.builder.facing.value}")
    print(f"Track length: {generator.get_total_track_length()}")


def build_thrill_section(generator: CoasterGenerator) -> None:
    """Climb a spiral, drop down a shaft and bank out of it."""
    print("\n" + "=" * 60)
    print("2. Thrill Section")
    print("=" * 60)

    generator.add_spiral(VerticalDirection.UP, TurnDirection.LEFT, height=12, width=4)
    generator.add_speed_boost(3)
    generator.add_free_fall(10)
    generator.add_straight_line(4, PowerLevel.FULL)
    generator.add_banked_turn(TurnDirection.LEFT, bank_height=4)
    generator.add_ramp(VerticalDirection.DOWN, 2, horiz_space=3)
    generator.place_track_end()

    print(f"\nCursor: {generator.builder.position.as_tuple()} facing {generator.builder.facing.value}")
    print(f"Track length: {generator.get_total_track_length()}")
    print(f"Powered rails: {generator.get_total_powered_rails()}")


def summarize(world: BlockWorld) -> None:
    """Print what ended up in the world."""
    print("\n" + "=" * 60)
    print("3. World Summary")
    print("=" * 60)

    for block in (Block.RAIL, Block.POWERED_RAIL, Block.REDSTONE_BLOCK, Block.GLASS, Block.TORCH):
        print(f"  {block.value:<16} {world.count(block):>5}")
    print(f"  {'total blocks':<16} {world.block_count:>5}")
    print(f"  world operations: {dict(world.operation_counts)}")


def main():
    parser = argparse.ArgumentParser(description="Build an example roller coaster")
    parser.add_argument("--debug", action="store_true", help="Log every track piece")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    world = BlockWorld()
    config = TrackConfiguration(
        power_interval=4,
        decoration_style=DecorationStyle.TORCHES,
        debug_mode=args.debug,
    )
    generator = CoasterGenerator(Builder(world), config)

    build_simple_loop(generator)
    build_thrill_section(generator)
    summarize(world)


if __name__ == "__main__":
    main()
