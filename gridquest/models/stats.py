"""Base statistics and the race table."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Race(str, Enum):
    """Playable and enemy races."""

    HUMAN = "Human"
    ELF = "Elf"
    DWARF = "Dwarf"
    HOBBIT = "Hobbit"
    ORC = "Orc"


class BaseStats(BaseModel):
    """Race base statistics, before any equipment."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    attack: int = Field(description="Base attack")
    attack_chance: float = Field(ge=0.0, le=1.0, description="Probability that an attack lands")
    defence: int = Field(description="Base defence")
    defence_chance: float = Field(ge=0.0, le=1.0, description="Probability of a successful defence")
    health: int = Field(ge=1, description="Base maximum health")
    strength: int = Field(ge=0, description="Base strength (carrying capacity)")


RACE_BASE_STATS: dict[Race, BaseStats] = {
    Race.HUMAN: BaseStats(attack=30, attack_chance=2 / 3, defence=20, defence_chance=1 / 2, health=60, strength=100),
    Race.ELF: BaseStats(attack=40, attack_chance=1.0, defence=10, defence_chance=1 / 4, health=40, strength=70),
    Race.DWARF: BaseStats(attack=30, attack_chance=2 / 3, defence=20, defence_chance=2 / 3, health=50, strength=130),
    Race.HOBBIT: BaseStats(attack=25, attack_chance=1 / 3, defence=20, defence_chance=2 / 3, health=70, strength=85),
    Race.ORC: BaseStats(attack=25, attack_chance=1 / 4, defence=10, defence_chance=1 / 4, health=50, strength=130),
}

# Orcs swap between these two profiles; health and strength never change
ORC_DAY_STATS = RACE_BASE_STATS[Race.ORC]
ORC_NIGHT_STATS = ORC_DAY_STATS.model_copy(
    update={"attack": 45, "attack_chance": 1.0, "defence": 25, "defence_chance": 1 / 2}
)
