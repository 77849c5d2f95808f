from typing import Any, TypedDict

DEFAULT_NAMESPACE = "minecraft"
UNKNOWN_WORLD = "unknown"


class BlockInfo(TypedDict):
    name: str
    id: str
    coordinates: str
    world: str


def block_type_id(type_id: str) -> str:
    """Namespaced identifier of a block type, e.g. ``minecraft:stone``."""
    if ":" not in type_id:
        return f"{DEFAULT_NAMESPACE}:{type_id}"
    return type_id


def block_display_name(type_id: str) -> str:
    """
    Turns a block identifier into its constant-style name.

    Args:
        type_id (str): The block type, with or without namespace
    Returns:
        str: The upper-cased path part (``minecraft:stone`` -> ``STONE``)
    """
    return block_type_id(type_id).split(":", 1)[1].upper()


def world_name(location: Any) -> str:
    dimension = location.dimension
    if dimension is None:
        return UNKNOWN_WORLD
    return dimension.name


def format_coordinates(location: Any) -> str:
    return f"({location.block_x}, {location.block_y}, {location.block_z})"


def describe_block(block: Any) -> BlockInfo:
    """Reads the display fields of a block (or block state) without touching it."""
    location = block.location

    return {
        "name": block_display_name(block.type),
        "id": block_type_id(block.type),
        "coordinates": format_coordinates(location),
        "world": world_name(location),
    }
