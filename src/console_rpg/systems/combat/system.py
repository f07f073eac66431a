"""Combat system: weapon attacks, abilities, monster death and counter-attacks."""
from __future__ import annotations

import logging
from typing import Any

from console_rpg.errors import (
    GameError,
    NoTargetError,
    NotFoundError,
    TargetRequiredError,
    UnknownAbilityError,
)
from console_rpg.mechanics.abilities import activate
from console_rpg.mechanics.combat import weapon_attack
from console_rpg.mechanics.loot import resolve_death_if_applicable
from console_rpg.mechanics.monsters import monster_attack
from console_rpg.models.ability import AbilityBase
from console_rpg.models.action import Action, ActionResult, ActionType, EventType
from console_rpg.models.monster import MonsterBase
from console_rpg.systems.base import GameContext, GameSystem

logger = logging.getLogger(__name__)


class CombatSystem(GameSystem):
    @property
    def system_id(self) -> str:
        return "combat"

    @property
    def handled_action_types(self) -> set[str]:
        return {ActionType.ATTACK.value, ActionType.USE_ABILITY.value}

    def resolve(self, action: Action, context: GameContext) -> ActionResult:
        try:
            target = self._select_target(action, context)
            if action.action_type == ActionType.USE_ABILITY:
                ability = self._select_ability(action, context)
                return self._resolve_ability(action, context, ability, target)
            return self._resolve_attack(action, context, target)
        except TargetRequiredError as e:
            return ActionResult.fail(action.id, "Choose a target", str(e), value=e.candidates)
        except GameError as e:
            return ActionResult.fail(action.id, "Cannot attack", str(e))

    def get_available_actions(self, context: GameContext) -> list[dict]:
        if not context.living_monsters():
            return []
        actions = [{"action_type": ActionType.ATTACK.value, "description": "Attack a monster"}]
        if context.player.ability_ids:
            actions.append({"action_type": ActionType.USE_ABILITY.value, "description": "Use an ability"})
        return actions

    def _select_target(self, action: Action, context: GameContext) -> MonsterBase:
        candidates = context.living_monsters()
        if not candidates:
            raise NoTargetError()
        if action.target_id is not None:
            for monster in candidates:
                if monster.id == action.target_id:
                    return monster
            raise NotFoundError("Monster", action.target_id)
        if len(candidates) == 1:
            return candidates[0]
        raise TargetRequiredError(candidates)

    def _select_ability(self, action: Action, context: GameContext) -> AbilityBase:
        player = context.player
        if not player.ability_ids:
            raise UnknownAbilityError(None)

        ability_id = action.parameters.get("ability_id")
        if ability_id is None:
            if len(player.ability_ids) > 1:
                raise GameError("Select an ability to use.")
            ability_id = next(iter(player.ability_ids))

        if not player.knows(ability_id):
            raise UnknownAbilityError(ability_id)
        ability = context.abilities.get(ability_id)
        if ability is None:
            raise NotFoundError("Ability", ability_id)
        return ability

    def _resolve_attack(self, action: Action, context: GameContext, monster: MonsterBase) -> ActionResult:
        damage, line = weapon_attack(context.player, monster)
        logger.info("%s attacked %s for %d", context.player.name, monster.name, damage)
        events = [{
            "event_type": EventType.ATTACK.value,
            "description": line,
            "target_id": monster.id,
            "damage": damage,
        }]
        return self._finish_round(action, context, monster, [line], events, "Attack successful")

    def _resolve_ability(
        self, action: Action, context: GameContext, ability: AbilityBase, monster: MonsterBase,
    ) -> ActionResult:
        health_before = monster.health
        line = activate(ability, context.player, monster)
        logger.info("%s used %s on %s", context.player.name, ability.name, monster.name)
        events = [{
            "event_type": EventType.ABILITY.value,
            "description": line,
            "ability_id": ability.id,
            "target_id": monster.id,
            "damage": health_before - monster.health,
        }]
        return self._finish_round(action, context, monster, [line], events, f"Used {ability.name}")

    def _finish_round(
        self,
        action: Action,
        context: GameContext,
        monster: MonsterBase,
        lines: list[str],
        events: list[dict[str, Any]],
        message: str,
    ) -> ActionResult:
        """Resolve death or counter-attack of the targeted monster."""
        player = context.player
        loot = context.items.get(monster.loot_item_id) if monster.loot_item_id is not None else None
        outcome = resolve_death_if_applicable(monster, player, loot)
        xp_gained = 0

        if outcome is not None:
            context.removed_monster_ids.add(monster.id)
            xp_gained = outcome.xp_gained
            lines.extend(outcome.lines)
            logger.info("%s was defeated by %s", monster.name, player.name)
            events.append({
                "event_type": EventType.DEATH.value,
                "description": f"{monster.name} has been defeated.",
                "target_id": monster.id,
            })
            if outcome.leveled_up:
                logger.info("%s reached level %d", player.name, player.level)
                events.append({
                    "event_type": EventType.LEVEL_UP.value,
                    "description": outcome.xp_message,
                    "level": player.level,
                })
            if outcome.looted is not None:
                events.append({
                    "event_type": EventType.LOOT.value,
                    "description": f"Looted {outcome.looted.name}.",
                    "item_id": outcome.looted.id,
                })
        else:
            lines.append(f"{monster.name} has {monster.health} HP remaining.")
            counter = monster_attack(monster, player)
            lines.append(counter)
            events.append({
                "event_type": EventType.COUNTER_ATTACK.value,
                "description": counter,
                "attacker_id": monster.id,
            })

        game_over = player.is_dead
        if game_over:
            logger.info("%s has fallen", player.name)
            lines.append("YOU HAVE DIED! Your adventure has come to an end...")
            events.append({
                "event_type": EventType.PLAYER_DEFEAT.value,
                "description": f"{player.name} was slain by {monster.name}.",
            })

        return ActionResult.ok(
            action.id,
            message,
            "\n".join(lines),
            value=monster,
            events=events,
            xp_gained=xp_gained,
            game_over=game_over,
        )
