from typing import Any, Protocol

import endstone
from endstone.event import BlockBreakEvent, BlockPlaceEvent, event_handler
from endstone.plugin import Plugin

from .config import HydraConfig, default_config
from .utils.block_utils import describe_block


class Broadcaster(Protocol):
    """Anything that can deliver a chat line to every connected player, such as endstone.Server."""

    def broadcast_message(self, message: str) -> None: ...


class BlockBreakLogger:
    """Announces every block broken or placed on the server in chat."""

    plugin: Plugin
    broadcaster: Broadcaster
    config: HydraConfig

    def __init__(
        self,
        plugin: Plugin,
        broadcaster: Broadcaster,
        logger: endstone.Logger | None = None,
        config: HydraConfig | None = None,
    ):
        self.plugin = plugin
        self.broadcaster = broadcaster
        self.logger = logger
        self.config = config if config is not None else default_config()

    @staticmethod
    def format_message(verb: str, block: Any) -> str:
        info = describe_block(block)
        return f"Block {verb}: {info['name']} [{info['id']}] at {info['coordinates']} in {info['world']}"

    def _broadcast(self, message: str) -> None:
        self.broadcaster.broadcast_message(message)

        if self.logger is None:
            return
        if self.config.get("log_to_console", False):
            self.logger.info(f"[BlockBreakLogger] {message}")
        else:
            self.logger.debug(f"[BlockBreakLogger] broadcast {message!r}")

    @event_handler
    def on_block_break(self, event: BlockBreakEvent):
        if not self.config.get("broadcast_block_break", True):
            return
        self._broadcast(self.format_message("broken", event.block))

    @event_handler
    def on_block_place(self, event: BlockPlaceEvent):
        if not self.config.get("broadcast_block_place", True):
            return
        # event.block is the block being replaced, the placed one lives in the state
        self._broadcast(self.format_message("placed", event.block_placed_state))
