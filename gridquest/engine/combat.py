"""Combat system for single attack exchanges."""

import logging
from typing import Any, Optional

from gridquest.engine.dice import DiceRoller
from gridquest.models.actions import AttackOutcome, AttackResult
from gridquest.models.character import Character

logger = logging.getLogger(__name__.split(".")[-1])


class CombatSystem:
    """Resolves one attack of an attacker against a defender."""

    @staticmethod
    def attack(attacker: Character, defender: Character, rng: Optional[Any] = None) -> AttackResult:
        """
        Run a single attack exchange.

        1. Attack roll above the attacker's attack chance: miss.
        2. Defence roll below the defender's defence chance: the defender's
           race behaviour runs and the damage step is skipped.
        3. Otherwise total attack - total defence is dealt when positive,
           or the attack is blocked.

        Args:
            attacker: Attacking character
            defender: Defending character
            rng: Optional random source

        Returns:
            AttackResult describing exactly one outcome
        """
        logger.info(f"{attacker.name} attacks {defender.name}")
        health_before = defender.current_health
        damage = 0
        defence_roll = None

        attack_roll = DiceRoller.roll_chance(rng)
        if attack_roll > attacker.base.attack_chance:
            outcome = AttackOutcome.MISS
            logger.info(f"{attacker.name} missed")
        else:
            defence_roll = DiceRoller.roll_chance(rng)
            if defence_roll < defender.base.defence_chance:
                outcome = AttackOutcome.DEFENDED
                defender.on_successful_defence(attacker, rng)
            else:
                raw = attacker.total_attack() - defender.total_defence()
                if raw > 0:
                    outcome = AttackOutcome.DAMAGED
                    damage = raw
                    defender.take_damage(raw)
                    logger.info(f"{defender.name} takes {raw} damage")
                else:
                    outcome = AttackOutcome.BLOCKED
                    logger.info(f"{defender.name} blocked the attack")

        CombatSystem._clamp_health(defender)
        defeated = defender.is_defeated()
        if defeated:
            logger.info(f"{defender.name} defeated")

        logger.debug(
            f"attack rolls: attack={attack_roll:.3f}/{attacker.base.attack_chance:.3f} "
            f"defence={defence_roll}/{defender.base.defence_chance:.3f} -> {outcome.value}"
        )
        return AttackResult(
            attacker=attacker.name,
            defender=defender.name,
            outcome=outcome,
            damage=damage,
            health_change=defender.current_health - health_before,
            defender_health=defender.current_health,
            defeated=defeated,
            attack_roll=attack_roll,
            defence_roll=defence_roll,
        )

    @staticmethod
    def _clamp_health(character: Character) -> None:
        """Keep current health within [0, total health]."""
        ceiling = max(0, character.total_health())
        if character.current_health > ceiling:
            character.current_health = ceiling
