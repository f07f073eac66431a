"""Inventory system: equipping gear and reviewing the character sheet."""
from __future__ import annotations

import logging

from console_rpg.mechanics.leveling import XP_PER_LEVEL, xp_to_next_level
from console_rpg.models.action import Action, ActionResult, ActionType, EventType
from console_rpg.models.item import Item, ItemType
from console_rpg.systems.base import GameContext, GameSystem

logger = logging.getLogger(__name__)

_EQUIPPABLE = (ItemType.WEAPON, ItemType.ARMOR)


class InventorySystem(GameSystem):
    @property
    def system_id(self) -> str:
        return "inventory"

    @property
    def handled_action_types(self) -> set[str]:
        return {
            ActionType.EQUIP_ITEM.value,
            ActionType.VIEW_INVENTORY.value,
            ActionType.VIEW_STATS.value,
        }

    def resolve(self, action: Action, context: GameContext) -> ActionResult:
        if action.action_type == ActionType.EQUIP_ITEM:
            return self._resolve_equip(action, context)
        if action.action_type == ActionType.VIEW_INVENTORY:
            return self._resolve_inventory(action, context)
        return self._resolve_stats(action, context)

    def get_available_actions(self, context: GameContext) -> list[dict]:
        actions = [
            {"action_type": ActionType.VIEW_INVENTORY.value, "description": "Check your backpack"},
            {"action_type": ActionType.VIEW_STATS.value, "description": "Review your character"},
        ]
        inv = context.player.inventory
        if inv and any(i.item_type in _EQUIPPABLE for i in inv.items):
            actions.append({"action_type": ActionType.EQUIP_ITEM.value, "description": "Equip an item"})
        return actions

    def _resolve_equip(self, action: Action, context: GameContext) -> ActionResult:
        player = context.player
        inv = player.inventory
        if inv is None or not inv.items:
            return ActionResult.fail(action.id, "Nothing to equip", "Your backpack is empty.")

        if action.target_id is None:
            candidates = [i for i in inv.items if i.item_type in _EQUIPPABLE]
            if not candidates:
                return ActionResult.fail(action.id, "Nothing to equip", "You carry nothing you can equip.")
            if len(candidates) > 1:
                return ActionResult.fail(
                    action.id, "Choose an item", "Select an item to equip.", value=candidates,
                )
            item = candidates[0]
        else:
            item = inv.find(action.target_id)
            if item is None:
                return ActionResult.fail(action.id, "Item not found", "That item is not in your backpack.")

        if item.item_type not in _EQUIPPABLE:
            return ActionResult.fail(action.id, "Cannot equip", f"{item.name} cannot be equipped.")

        slot = "weapon" if item.item_type == ItemType.WEAPON else "armor"
        previous: Item | None = getattr(player.equipment, slot)
        setattr(player.equipment, slot, item)
        inv.items = [i for i in inv.items if i.id != item.id]
        if previous is not None:
            inv.items.append(previous)

        logger.info("%s equipped %s as %s", player.name, item.name, slot)
        lines = [f"You equip {item.name}."]
        if previous is not None:
            lines.append(f"{previous.name} goes back into your backpack.")
        return ActionResult.ok(
            action.id,
            f"Equipped {item.name}",
            "\n".join(lines),
            value=item,
            events=[{
                "event_type": EventType.EQUIP.value,
                "description": f"Equipped {item.name}.",
                "item_id": item.id,
                "slot": slot,
            }],
        )

    def _resolve_inventory(self, action: Action, context: GameContext) -> ActionResult:
        player = context.player
        weapon = player.equipment.weapon
        armor = player.equipment.armor
        lines = [
            "Equipped:",
            f"Weapon: {weapon.name if weapon else 'None'}",
            f"Armor:  {armor.name if armor else 'None'}",
            "",
            "Backpack:",
        ]
        items = player.inventory.items if player.inventory else []
        if items:
            lines.extend(f"- {i.name} ({i.item_type.value}) - Wt: {i.weight}" for i in items)
        else:
            lines.append("(empty)")
        return ActionResult.ok(action.id, "Inventory", "\n".join(lines), value=player)

    def _resolve_stats(self, action: Action, context: GameContext) -> ActionResult:
        p = context.player
        lines = [
            f"Character: {p.name}",
            f"Level: {p.level}",
            f"Health: {p.health}/{p.max_health}",
            f"Experience: {p.experience} ({xp_to_next_level(p.experience)}/{XP_PER_LEVEL} to next level)",
        ]
        return ActionResult.ok(action.id, "Character stats", "\n".join(lines), value=p)
