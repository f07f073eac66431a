"""XP and level-up mechanics: pure math, no I/O."""
from __future__ import annotations

from console_rpg.models.character import Player

XP_PER_LEVEL = 100
MAX_HEALTH_PER_LEVEL_UP = 10


def level_for_xp(xp: int) -> int:
    """Determine level from total XP: a new level every 100 XP."""
    return xp // XP_PER_LEVEL + 1


def xp_to_next_level(xp: int) -> int:
    """Progress within the current level, out of 100."""
    return xp % XP_PER_LEVEL


def gain_experience(player: Player, amount: int) -> str:
    """Award XP and level the player up when a threshold is crossed.

    A level-up raises max health by 10 and fully heals. The bonus is
    granted once per award, even when one award crosses several levels.
    """
    player.experience += amount
    calculated = level_for_xp(player.experience)

    if calculated > player.level:
        player.level = calculated
        player.max_health += MAX_HEALTH_PER_LEVEL_UP
        player.health = player.max_health
        return f"LEVEL UP! You are now Level {player.level}! (Max HP increased to {player.max_health})"

    return f"Gained {amount} XP. ({xp_to_next_level(player.experience)}/{XP_PER_LEVEL} to next level)"
