"""Tests for item models and the item catalog."""

import pytest
from pydantic import ValidationError

from gridquest.models import catalog
from gridquest.models.items import Armour, Item, ItemKind, Ring, Shield, Weapon


class TestItems:
    """Test suite for item models."""

    def test_kinds_are_fixed_per_type(self):
        """Test that every item type carries its own kind tag."""
        assert Item(name="Pebble", weight=1).kind == ItemKind.GENERIC
        assert Weapon(name="Club", weight=3, attack_bonus=2).kind == ItemKind.WEAPON
        assert Armour(name="Mail", weight=20, defence_bonus=4).kind == ItemKind.ARMOUR
        assert Shield(name="Buckler", weight=5, defence_bonus=2).kind == ItemKind.SHIELD
        assert Ring(name="Band", weight=1, health_delta=-3).kind == ItemKind.RING

    def test_kind_cannot_be_overridden(self):
        """Test that a plain item cannot pretend to be a weapon."""
        with pytest.raises(ValidationError):
            Item(name="Fake", weight=1, kind=ItemKind.WEAPON)

    def test_items_are_immutable(self):
        """Test that items cannot be changed after construction."""
        sword = catalog.sword()
        with pytest.raises(ValidationError):
            sword.attack_bonus = 99  # type: ignore

    def test_negative_weight_rejected(self):
        """Test that weight must be non-negative."""
        with pytest.raises(ValidationError):
            Weapon(name="Feather", weight=-1, attack_bonus=1)

    def test_ring_health_delta_may_be_negative(self):
        """Test that rings can lower maximum health."""
        ring = catalog.ring_of_strength()
        assert ring.health_delta == -10
        assert ring.strength_bonus == 50


class TestCatalog:
    """Test suite for the predefined items and enemies."""

    def test_catalog_values(self):
        """Test the predefined item values."""
        assert (catalog.sword().weight, catalog.sword().attack_bonus) == (10, 10)
        assert (catalog.dagger().weight, catalog.dagger().attack_bonus) == (5, 5)
        plate = catalog.plate_armour()
        assert (plate.weight, plate.defence_bonus, plate.attack_penalty) == (40, 10, 5)
        small = catalog.small_shield()
        assert (small.weight, small.defence_bonus, small.attack_penalty) == (10, 5, 0)
        life = catalog.ring_of_life()
        assert (life.weight, life.health_delta, life.strength_bonus) == (1, 10, 0)

    def test_default_items_are_fresh_instances(self):
        """Test that each call returns new item objects."""
        first = catalog.default_items()
        second = catalog.default_items()
        assert len(first) == 6
        assert all(a == b and a is not b for a, b in zip(first, second))

    def test_default_enemies_cover_every_race(self):
        """Test the default enemy line-up."""
        enemies = catalog.default_enemies()
        assert [e.name for e in enemies] == ["Bob", "Legolas", "Gimli", "Frodo", "Azog"]
        assert len({e.race for e in enemies}) == 5
