"""
Tests for the block field helpers.
"""

from types import SimpleNamespace

from endstone_hydramc.utils import (
    UNKNOWN_WORLD,
    block_display_name,
    block_type_id,
    describe_block,
    format_coordinates,
    world_name,
)

from conftest import make_block


class TestBlockNames:
    def test_display_name_is_upper_cased_path(self):
        assert block_display_name("minecraft:stone") == "STONE"
        assert block_display_name("minecraft:oak_log") == "OAK_LOG"

    def test_display_name_without_namespace(self):
        assert block_display_name("dirt") == "DIRT"

    def test_type_id_keeps_namespace(self):
        assert block_type_id("minecraft:stone") == "minecraft:stone"
        assert block_type_id("custom:ruby_ore") == "custom:ruby_ore"

    def test_type_id_adds_default_namespace(self):
        assert block_type_id("stone") == "minecraft:stone"


class TestLocationFields:
    def test_world_name(self):
        assert world_name(make_block(world="Nether").location) == "Nether"

    def test_world_name_when_world_is_missing(self):
        assert world_name(make_block(world=None).location) == UNKNOWN_WORLD == "unknown"

    def test_coordinates_are_signed_and_unpadded(self):
        assert format_coordinates(make_block(x=10, y=64, z=-3).location) == "(10, 64, -3)"
        assert format_coordinates(make_block(x=-1200, y=-64, z=0).location) == "(-1200, -64, 0)"


def test_describe_block():
    assert describe_block(make_block()) == {
        "name": "STONE",
        "id": "minecraft:stone",
        "coordinates": "(10, 64, -3)",
        "world": "overworld",
    }


def test_describe_block_does_not_modify_block():
    block = make_block()
    before = (block.type, vars(block.location).copy())

    describe_block(block)

    assert (block.type, vars(block.location)) == before
    assert isinstance(block.location.dimension, SimpleNamespace)
