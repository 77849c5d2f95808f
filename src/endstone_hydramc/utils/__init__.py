from .block_utils import (
    BlockInfo,
    DEFAULT_NAMESPACE,
    UNKNOWN_WORLD,
    block_display_name,
    block_type_id,
    describe_block,
    format_coordinates,
    world_name,
)

__all__ = [
    # block fields
    "BlockInfo",
    "DEFAULT_NAMESPACE",
    "UNKNOWN_WORLD",
    "block_display_name",
    "block_type_id",
    "describe_block",

    # location fields
    "format_coordinates",
    "world_name",
]
