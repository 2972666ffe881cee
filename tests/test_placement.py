"""Tests for rail placement primitives."""

import pytest

from coasterbuilder.track.config import DecorationStyle, TrackConfiguration
from coasterbuilder.track.placement import RailPlacer
from coasterbuilder.world.blocks import Block
from coasterbuilder.world.position import CardinalDirection, Position
from coasterbuilder.world.world import BlockWorld


ORIGIN = Position(0, 64, 0)


def make_placer(**config_kwargs):
    """Create a placer over an empty world."""
    world = BlockWorld()
    return world, RailPlacer(world, TrackConfiguration(**config_kwargs))


class TestRailColumns:
    """Test rail placement."""
    
    def test_plain_rail(self):
        """Test plain rail sits on the rail base."""
        world, placer = make_placer()
        placer.place_rail(ORIGIN)
        
        assert world.get_block(ORIGIN) == Block.OAK_PLANKS
        assert world.get_block(ORIGIN.move(CardinalDirection.UP)) == Block.RAIL
        
    def test_powered_rail(self):
        """Test powered rail sits on a redstone block."""
        world, placer = make_placer()
        placer.place_powered_rail(ORIGIN)
        
        assert world.get_block(ORIGIN) == Block.REDSTONE_BLOCK
        assert world.get_block(ORIGIN.move(CardinalDirection.UP)) == Block.POWERED_RAIL
        
    def test_unpowered_powered_rail(self):
        """Test shape-only powered rail has no power source."""
        world, placer = make_placer(rail_base=Block.COBBLESTONE)
        placer.place_unpowered_powered_rail(ORIGIN)
        
        assert world.get_block(ORIGIN) == Block.COBBLESTONE
        assert world.get_block(ORIGIN.move(CardinalDirection.UP)) == Block.POWERED_RAIL
        
    def test_headroom_cleared(self):
        """Test blocks above the rail are cleared."""
        world, placer = make_placer()
        for height in range(2, 5):
            world.place(Block.STONE, ORIGIN.move(CardinalDirection.UP, height))
        world.place(Block.STONE, ORIGIN.move(CardinalDirection.UP, 5))
        
        placer.place_rail(ORIGIN)
        
        assert world.get_block(ORIGIN.move(CardinalDirection.UP, 2)) == Block.AIR
        assert world.get_block(ORIGIN.move(CardinalDirection.UP, 3)) == Block.AIR
        assert world.get_block(ORIGIN.move(CardinalDirection.UP, 4)) == Block.STONE
        assert world.get_block(ORIGIN.move(CardinalDirection.UP, 5)) == Block.STONE


class TestFluidProtection:
    """Test fluid replacement around new rails."""
    
    def test_no_protection_no_replace_calls(self):
        """Test disabled protection never sweeps for fluids."""
        world, placer = make_placer(water_protection=False, lava_protection=False)
        placer.place_rail(ORIGIN)
        placer.place_powered_rail(ORIGIN.move(CardinalDirection.NORTH))
        
        assert world.operation_counts["replace"] == 0
        
    def test_water_and_lava_replaced(self):
        """Test both variants of both fluids become glass."""
        world, placer = make_placer()
        flowing_water = ORIGIN.move(CardinalDirection.EAST).move(CardinalDirection.UP)
        still_water = ORIGIN.move(CardinalDirection.SOUTH).move(CardinalDirection.UP, 2)
        lava = ORIGIN.move(CardinalDirection.WEST).move(CardinalDirection.UP, 4)
        flowing_lava = ORIGIN.move(CardinalDirection.NORTH).move(CardinalDirection.UP, 3)
        world.place(Block.FLOWING_WATER, flowing_water)
        world.place(Block.WATER, still_water)
        world.place(Block.LAVA, lava)
        world.place(Block.FLOWING_LAVA, flowing_lava)
        
        placer.place_rail(ORIGIN)
        
        for pos in (flowing_water, still_water, lava, flowing_lava):
            assert world.get_block(pos) == Block.GLASS
        assert world.operation_counts["replace"] == 4
            
    def test_fluid_outside_box_untouched(self):
        """Test fluids beyond the protection box stay."""
        world, placer = make_placer()
        above = ORIGIN.move(CardinalDirection.EAST).move(CardinalDirection.UP, 5)
        beside = ORIGIN.move(CardinalDirection.EAST, 2).move(CardinalDirection.UP)
        world.place(Block.WATER, above)
        world.place(Block.WATER, beside)
        
        placer.place_rail(ORIGIN)
        
        assert world.get_block(above) == Block.WATER
        assert world.get_block(beside) == Block.WATER
        
    def test_lava_only(self):
        """Test water survives when only lava protection is on."""
        world, placer = make_placer(water_protection=False)
        water = ORIGIN.move(CardinalDirection.EAST).move(CardinalDirection.UP)
        lava = ORIGIN.move(CardinalDirection.WEST).move(CardinalDirection.UP)
        world.place(Block.WATER, water)
        world.place(Block.LAVA, lava)
        
        placer.place_rail(ORIGIN)
        
        assert world.get_block(water) == Block.WATER
        assert world.get_block(lava) == Block.GLASS
        
    def test_fluid_in_headroom_becomes_air(self):
        """Test fluid directly above the rail ends up cleared."""
        world, placer = make_placer()
        pos = ORIGIN.move(CardinalDirection.UP, 3)
        world.place(Block.WATER, pos)
        
        placer.place_rail(ORIGIN)
        
        assert world.get_block(pos) == Block.AIR


class TestClearAirAbove:
    """Test head-room clearing."""
    
    def test_skips_air(self):
        """Test only non-air cells are written."""
        world, placer = make_placer()
        world.place(Block.STONE, ORIGIN.move(CardinalDirection.UP, 2))
        world.reset_counts()
        
        placer.clear_air_above(ORIGIN, 1, 3)
        
        assert world.operation_counts["place"] == 1
        assert world.operation_counts["test"] == 3
        assert world.block_count == 0
        
    def test_start_offset(self):
        """Test start offset 0 includes the position itself."""
        world, placer = make_placer()
        world.place(Block.STONE, ORIGIN)
        world.place(Block.STONE, ORIGIN.move(CardinalDirection.UP, 2))
        
        placer.clear_air_above(ORIGIN, 0, 2)
        
        assert world.get_block(ORIGIN) == Block.AIR
        assert world.get_block(ORIGIN.move(CardinalDirection.UP, 2)) == Block.STONE


class TestDecoration:
    """Test decoration beside the track."""
    
    def test_no_decoration(self):
        """Test NONE style makes no world calls."""
        world, placer = make_placer()
        
        placer.place_decoration(ORIGIN)
        
        assert sum(world.operation_counts.values()) == 0
        
    @pytest.mark.parametrize("style, block", [
        (DecorationStyle.TORCHES, Block.TORCH),
        (DecorationStyle.LANTERNS, Block.LANTERN),
        (DecorationStyle.GLOWSTONE, Block.GLOWSTONE),
    ])
    def test_decoration_both_sides(self, style, block):
        """Test decoration lands on both sides, two blocks up."""
        world, placer = make_placer(decoration_style=style)
        
        placer.place_decoration(ORIGIN)
        
        assert world.get_block(Position(-1, 66, 0)) == block
        assert world.get_block(Position(1, 66, 0)) == block
        
    def test_decoration_only_in_air(self):
        """Test occupied cells are left alone."""
        world, placer = make_placer(decoration_style=DecorationStyle.TORCHES)
        world.place(Block.STONE, Position(-1, 66, 0))
        
        placer.place_decoration(ORIGIN)
        
        assert world.get_block(Position(-1, 66, 0)) == Block.STONE
        assert world.get_block(Position(1, 66, 0)) == Block.TORCH
