"""Character model, race variants and their defence behaviour."""

import logging
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from gridquest.config import DEFAULT_HOBBIT_MAX_DEFENCE_LOSS, DEFAULT_ORC_DAY_DEFENCE_DIVISOR
from gridquest.models.actions import EquipmentOutcome
from gridquest.models.items import Armour, Item, ItemKind, Ring, Shield, Weapon
from gridquest.models.stats import ORC_DAY_STATS, ORC_NIGHT_STATS, RACE_BASE_STATS, BaseStats, Race

logger = logging.getLogger(__name__.split(".")[-1])


class Character(BaseModel):
    """A combatant: base stats plus whatever it has equipped.

    Total stats are derived from the base stats and the equipment on every
    call. ``current_health`` is the only running value; it starts at
    ``total_health()``.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(description="Display name")
    race: Race = Field(description="Race tag")
    base: BaseStats = Field(description="Base stats before equipment")
    current_health: Optional[int] = Field(default=None, ge=0, description="Current health points")

    # Equipment
    weapon: Optional[Weapon] = Field(default=None, description="Wielded weapon")
    armour: Optional[Armour] = Field(default=None, description="Worn armour")
    shield: Optional[Shield] = Field(default=None, description="Carried shield")
    rings: list[Ring] = Field(default_factory=list, description="Worn rings, in pick-up order")

    def model_post_init(self, __context: Any) -> None:
        if self.current_health is None:
            self.current_health = max(0, self.total_health())

    @computed_field
    def inventory(self) -> list[Item]:
        """Every equipped item except the weapon."""
        items: list[Item] = []
        if self.armour:
            items.append(self.armour)
        if self.shield:
            items.append(self.shield)
        items.extend(self.rings)
        return items

    # Derived stats

    def total_attack(self) -> int:
        """Base attack + weapon - armour/shield penalties + ring strength."""
        total = self.base.attack
        if self.weapon:
            total += self.weapon.attack_bonus
        if self.armour:
            total -= self.armour.attack_penalty
        if self.shield:
            total -= self.shield.attack_penalty
        for ring in self.rings:
            total += ring.strength_bonus
        return total

    def total_defence(self) -> int:
        """Base defence + armour and shield bonuses."""
        total = self.base.defence
        if self.armour:
            total += self.armour.defence_bonus
        if self.shield:
            total += self.shield.defence_bonus
        return total

    def total_strength(self) -> int:
        """Base strength + ring strength."""
        return self.base.strength + sum(ring.strength_bonus for ring in self.rings)

    def total_health(self) -> int:
        """Maximum health: base health + ring health deltas."""
        return self.base.health + sum(ring.health_delta for ring in self.rings)

    def current_weight(self) -> int:
        """Weight of everything equipped."""
        total = 0
        if self.weapon:
            total += self.weapon.weight
        if self.armour:
            total += self.armour.weight
        if self.shield:
            total += self.shield.weight
        for ring in self.rings:
            total += ring.weight
        return total

    def is_defeated(self) -> bool:
        return self.current_health <= 0

    # Equipment changes

    def pick_up(self, item: Item) -> EquipmentOutcome:
        """
        Equip an item found in the world.

        Args:
            item: Item to equip

        Returns:
            EQUIPPED on success, TOO_HEAVY or NOT_RECOGNIZED otherwise
            (equipment is left unchanged on failure)
        """
        if self.current_weight() + item.weight > self.total_strength():
            logger.info(f"{self.name} cannot carry {item.name}: too heavy")
            return EquipmentOutcome.TOO_HEAVY

        if item.kind == ItemKind.WEAPON:
            self.weapon = item
        elif item.kind == ItemKind.ARMOUR:
            self.armour = item
        elif item.kind == ItemKind.SHIELD:
            self.shield = item
        elif item.kind == ItemKind.RING:
            self.rings = self.rings + [item]
        else:
            logger.info(f"{self.name} cannot equip {item.name}: item not recognized")
            return EquipmentOutcome.NOT_RECOGNIZED

        logger.info(f"{self.name} equipped {item.kind.value} {item.name}")
        return EquipmentOutcome.EQUIPPED

    def drop_weapon(self) -> EquipmentOutcome:
        return self._drop_slot("weapon")

    def drop_armour(self) -> EquipmentOutcome:
        return self._drop_slot("armour")

    def drop_shield(self) -> EquipmentOutcome:
        return self._drop_slot("shield")

    def drop_ring(self, index: int) -> EquipmentOutcome:
        """
        Drop the ring at ``index`` (0-based).

        Current health is left as is even when the ring raised maximum health.

        Args:
            index: Position of the ring in ``rings``

        Returns:
            DROPPED, or INVALID_RING_INDEX when out of range
        """
        if not 0 <= index < len(self.rings):
            return EquipmentOutcome.INVALID_RING_INDEX
        dropped = self.rings[index]
        self.rings = self.rings[:index] + self.rings[index + 1 :]
        logger.info(f"{self.name} dropped ring {dropped.name}")
        return EquipmentOutcome.DROPPED

    def _drop_slot(self, slot: str) -> EquipmentOutcome:
        item = getattr(self, slot)
        if item is None:
            return EquipmentOutcome.NOTHING_TO_DROP
        setattr(self, slot, None)
        logger.info(f"{self.name} dropped {slot} {item.name}")
        return EquipmentOutcome.DROPPED

    # Health helpers

    def heal(self, amount: int) -> int:
        """Raise current health, capped at total health. Returns the change."""
        before = self.current_health
        self.current_health = max(before, min(before + amount, self.total_health()))
        return self.current_health - before

    def take_damage(self, amount: int) -> int:
        """Lower current health, clamped at 0. Returns the change (<= 0)."""
        before = self.current_health
        self.current_health = max(0, before - amount)
        return self.current_health - before

    # Race behaviour

    def on_successful_defence(self, attacker: "Character", rng: Optional[Any] = None) -> int:
        """
        Race-specific side effect of a successful defence.

        Args:
            attacker: Character whose attack was defended
            rng: Optional random source

        Returns:
            Change applied to this character's current health
        """
        return 0


class Human(Character):
    """Balanced stats."""

    race: Literal[Race.HUMAN] = Race.HUMAN
    base: BaseStats = Field(default_factory=lambda: RACE_BASE_STATS[Race.HUMAN])

    def on_successful_defence(self, attacker: Character, rng: Optional[Any] = None) -> int:
        logger.info(f"{self.name} defended successfully")
        return 0


class Elf(Character):
    """Always hits, rarely defends; heals a little on a successful defence."""

    race: Literal[Race.ELF] = Race.ELF
    base: BaseStats = Field(default_factory=lambda: RACE_BASE_STATS[Race.ELF])

    def on_successful_defence(self, attacker: Character, rng: Optional[Any] = None) -> int:
        change = self.heal(1)
        logger.info(f"{self.name} defended successfully, health now {self.current_health}")
        return change


class Dwarf(Character):
    """Strong and sturdy."""

    race: Literal[Race.DWARF] = Race.DWARF
    base: BaseStats = Field(default_factory=lambda: RACE_BASE_STATS[Race.DWARF])

    def on_successful_defence(self, attacker: Character, rng: Optional[Any] = None) -> int:
        logger.info(f"{self.name} defended successfully")
        return 0


class Hobbit(Character):
    """Defends often but gets bruised doing it."""

    race: Literal[Race.HOBBIT] = Race.HOBBIT
    base: BaseStats = Field(default_factory=lambda: RACE_BASE_STATS[Race.HOBBIT])

    def on_successful_defence(self, attacker: Character, rng: Optional[Any] = None) -> int:
        from gridquest.engine.dice import DiceRoller

        loss = DiceRoller.roll_range(0, DEFAULT_HOBBIT_MAX_DEFENCE_LOSS, rng)
        change = self.take_damage(loss)
        logger.info(f"{self.name} defended successfully, health reduced to {self.current_health}")
        return change


class Orc(Character):
    """Weak by day, dangerous at night."""

    race: Literal[Race.ORC] = Race.ORC
    base: BaseStats = Field(default_factory=lambda: ORC_DAY_STATS)
    is_night: bool = Field(default=False, description="Whether the night profile is active")

    def model_post_init(self, __context: Any) -> None:
        # The profile always follows the flag, including at construction
        self.base = ORC_NIGHT_STATS if self.is_night else ORC_DAY_STATS
        super().model_post_init(__context)

    def set_time_of_day(self, is_night: bool) -> None:
        """
        Switch between the day and night profile.

        Only attack, attack chance, defence and defence chance change;
        equipment and current health are untouched.

        Args:
            is_night: True for night, False for day
        """
        self.is_night = is_night
        self.base = ORC_NIGHT_STATS if is_night else ORC_DAY_STATS
        logger.debug(f"{self.name} switched to {'night' if is_night else 'day'} profile")

    def on_successful_defence(self, attacker: Character, rng: Optional[Any] = None) -> int:
        if self.is_night:
            change = self.heal(1)
            logger.info(f"{self.name} health increased to {self.current_health}")
            return change
        # Daylight: an orc still takes a quarter of the blow
        raw = max(0, attacker.total_attack() - self.total_defence())
        change = self.take_damage(raw // DEFAULT_ORC_DAY_DEFENCE_DIVISOR)
        logger.info(f"{self.name} defended by day, health now {self.current_health}")
        return change


AnyCharacter = Union[Human, Elf, Dwarf, Hobbit, Orc]

CHARACTER_CLASSES: dict[Race, type[Character]] = {
    Race.HUMAN: Human,
    Race.ELF: Elf,
    Race.DWARF: Dwarf,
    Race.HOBBIT: Hobbit,
    Race.ORC: Orc,
}


def create_character(race: Union[Race, str], name: str) -> Character:
    """
    Create a character of the given race with that race's default stats.

    Args:
        race: Race enum or race name (case-insensitive)
        name: Display name

    Returns:
        New character at full health with no equipment
    """
    if isinstance(race, str) and not isinstance(race, Race):
        race_key = next((r for r in Race if r.value.lower() == race.strip().lower()), None)
        if race_key is None:
            raise ValueError(f"Unknown race: {race}")
        race = race_key
    return CHARACTER_CLASSES[race](name=name)
