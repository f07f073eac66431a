from __future__ import annotations

import pytest

from console_rpg.engine.action_dispatcher import ActionDispatcher
from console_rpg.engine.system_registry import SystemRegistry


@pytest.fixture
def dispatcher(in_memory_db, small_world):
    registry = SystemRegistry()
    registry.register_defaults()
    registry.inject_all(repos=small_world)
    return ActionDispatcher(registry, in_memory_db, small_world)
