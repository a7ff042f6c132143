"""Predefined items and the default enemy line-up."""

from gridquest.models.character import Character, Dwarf, Elf, Hobbit, Human, Orc
from gridquest.models.items import Armour, Item, Ring, Shield, Weapon


def sword() -> Weapon:
    return Weapon(name="Sword", weight=10, attack_bonus=10)


def dagger() -> Weapon:
    return Weapon(name="Dagger", weight=5, attack_bonus=5)


def plate_armour() -> Armour:
    return Armour(name="Plate Armour", weight=40, defence_bonus=10, attack_penalty=5)


def leather_armour() -> Armour:
    return Armour(name="Leather Armour", weight=20, defence_bonus=5, attack_penalty=0)


def large_shield() -> Shield:
    return Shield(name="Large Shield", weight=30, defence_bonus=10, attack_penalty=5)


def small_shield() -> Shield:
    return Shield(name="Small Shield", weight=10, defence_bonus=5, attack_penalty=0)


def ring_of_life() -> Ring:
    return Ring(name="Ring of Life", weight=1, health_delta=10, strength_bonus=0)


def ring_of_strength() -> Ring:
    return Ring(name="Ring of Strength", weight=1, health_delta=-10, strength_bonus=50)


def default_items() -> list[Item]:
    """Starting loot scattered over a new board."""
    return [sword(), dagger(), leather_armour(), plate_armour(), ring_of_life(), ring_of_strength()]


def default_enemies() -> list[Character]:
    """One enemy of every race."""
    return [
        Human(name="Bob"),
        Elf(name="Legolas"),
        Dwarf(name="Gimli"),
        Hobbit(name="Frodo"),
        Orc(name="Azog"),
    ]
