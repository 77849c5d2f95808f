from types import SimpleNamespace

import pytest


class FakeServer:
    """Stands in for endstone.Server, recording every broadcast."""

    def __init__(self):
        self.messages = []

    def broadcast_message(self, message):
        self.messages.append(message)


def make_block(type_id="minecraft:stone", x=10, y=64, z=-3, world="overworld"):
    dimension = SimpleNamespace(name=world) if world is not None else None
    location = SimpleNamespace(block_x=x, block_y=y, block_z=z, dimension=dimension)
    return SimpleNamespace(type=type_id, location=location)


def break_event(block):
    return SimpleNamespace(block=block)


def place_event(block, replaced=None):
    if replaced is None:
        replaced = make_block("minecraft:air")
    return SimpleNamespace(block=replaced, block_placed_state=block)


@pytest.fixture
def server():
    return FakeServer()
