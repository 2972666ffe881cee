"""Tests for the station and end buffer fixtures."""

import pytest

from coasterbuilder.errors import InvalidParameterError
from coasterbuilder.track.fixtures import button_facing_for
from coasterbuilder.track.generator import CoasterGenerator
from coasterbuilder.world.blocks import Block, Item
from coasterbuilder.world.builder import Builder
from coasterbuilder.world.position import CompassDirection, Position
from coasterbuilder.world.world import LOCAL_PLAYER, BlockWorld


def make_generator() -> CoasterGenerator:
    """Create a generator over an empty world."""
    return CoasterGenerator(Builder(BlockWorld()))


class TestButtonFacing:
    """Test button orientation lookup."""
    
    def test_cardinal_facings(self):
        """Test each cardinal direction has its own data value."""
        assert button_facing_for(CompassDirection.NORTH) == 5
        assert button_facing_for(CompassDirection.EAST) == 3
        assert button_facing_for(CompassDirection.SOUTH) == 4
        assert button_facing_for(CompassDirection.WEST) == 2
        
    def test_diagonal_facing(self):
        """Test diagonals fall back to 0."""
        assert button_facing_for(CompassDirection.SOUTH_EAST) == 0


class TestTrackStart:
    """Test boarding station."""
    
    def test_station_layout(self):
        """Test entry rails, ramp, walls and button."""
        generator = make_generator()
        generator.place_track_start(Position(10, 64, 10), CompassDirection.NORTH)
        world = generator.world
        
        assert world.get_block(Position(10, 65, 10)) == Block.POWERED_RAIL
        assert world.get_block(Position(10, 65, 9)) == Block.POWERED_RAIL
        assert world.get_block(Position(10, 65, 8)) == Block.RAIL
        assert world.count(Block.QUARTZ_SLAB) == 3
        assert world.count(Block.QUARTZ_BLOCK) == 8
        assert world.get_block(Position(9, 65, 10)) == Block.REDSTONE_WIRE
        assert world.get_block(Position(9, 66, 10)) == Block.WARPED_BUTTON
        assert world.get_data(Position(9, 66, 10)) == 5
        
    def test_station_hands_out_minecart(self):
        """Test the player receives one minecart."""
        generator = make_generator()
        generator.place_track_start(Position(0, 64, 0), CompassDirection.EAST)
        
        assert generator.world.inventory_of(LOCAL_PLAYER) == {Item.MINECART: 1}
        
    def test_station_handoff(self):
        """Test the next piece starts right after the entry rails."""
        generator = make_generator()
        generator.place_track_start(Position(10, 64, 10), CompassDirection.NORTH)
        
        assert generator.builder.position == Position(10, 64, 7)
        assert generator.builder.facing == CompassDirection.NORTH
        assert generator.get_total_track_length() == 1
        
        generator.add_straight_line(2)
        assert generator.world.get_block(Position(10, 64, 7)) == Block.REDSTONE_BLOCK
        
    def test_station_facing_east(self):
        """Test the station rotates with its facing."""
        generator = make_generator()
        generator.place_track_start(Position(0, 64, 0), CompassDirection.EAST)
        
        assert generator.builder.position == Position(3, 64, 0)
        assert generator.world.get_data(Position(0, 66, -1)) == 3
        
    @pytest.mark.parametrize("position, direction", [
        (Position(0, 64, 0), "north"),
        (Position(0, 64, 0), None),
        ((0, 64, 0), CompassDirection.NORTH),
    ])
    def test_invalid_arguments_rejected(self, position, direction):
        """Test bad arguments are rejected before anything is built."""
        generator = make_generator()
        start = generator.builder.position
        
        with pytest.raises(InvalidParameterError):
            generator.place_track_start(position, direction)
            
        assert generator.world.block_count == 0
        assert generator.world.inventory_of(LOCAL_PLAYER) == {}
        assert generator.builder.position == start
        assert generator.builder.facing == CompassDirection.NORTH


class TestTrackEnd:
    """Test end buffer."""
    
    def test_end_buffer(self):
        """Test closing rail and buffer blocks."""
        generator = make_generator()
        generator.builder.teleport_to(Position(0, 64, 0))
        generator.place_track_end()
        world = generator.world
        
        assert world.get_block(Position(0, 65, 0)) == Block.RAIL
        assert world.get_block(Position(0, 64, -1)) == Block.OAK_PLANKS
        assert world.get_block(Position(0, 65, -1)) == Block.OAK_PLANKS
        assert generator.builder.position == Position(0, 64, -2)
        assert generator.get_total_track_length() == 1
