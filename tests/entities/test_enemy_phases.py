"""
test_enemy_phases.py
--------------------
Unit tests for the outlaw phase machine.

Covers:
1. Walk-in from the door to the assigned cover
2. Hide -> warn -> peek -> shoot -> hide cycle and the fire callback
3. Damage: retreat when wounded, fall and despawn when killed
4. Hit-test eligibility per phase
"""

import pytest

from saloon.entities.cover import COVERS
from saloon.entities.entity_state import (
    EnteringPhase,
    HidingPhase,
    WarningPhase,
    PeekingPhase,
    ShootingPhase,
    RetreatingPhase,
    DeadPhase,
)
from saloon.entities.enemies.enemy import Enemy

from conftest import settle_enemy


# ===========================================================
# Construction
# ===========================================================

class TestEnemySpawn:

    def test_starts_entering_at_the_door(self, make_enemy):
        enemy = make_enemy()

        assert enemy.phase_name == "entering"
        assert enemy.pos.x == 412
        assert enemy.pos.y == COVERS[0].peek_y()
        assert enemy.visible
        assert not enemy.is_dead

    def test_rejects_non_positive_hp(self, enemy_config):
        with pytest.raises(ValueError):
            Enemy(COVERS[0], hp=0, config=enemy_config)

    def test_hp_and_max_hp_match(self, make_enemy):
        enemy = make_enemy(hp=2)
        assert enemy.hp == enemy.max_hp == 2

    def test_hitbox_surrounds_upper_body(self, make_enemy):
        enemy = make_enemy()
        x, y = enemy.pos.x, enemy.pos.y

        assert enemy.hitbox() == (x - 30, y - 68, 60, 95)


# ===========================================================
# Entering
# ===========================================================

class TestEntering:

    def test_walks_toward_cover(self, make_enemy):
        enemy = make_enemy(speed=100)
        enemy.update(0.5)

        assert enemy.pos.x == pytest.approx(412 - 50)
        assert enemy.phase_name == "entering"

    def test_walk_frame_alternates(self, make_enemy):
        enemy = make_enemy(speed=10)
        enemy.update(0.15)
        assert enemy.phase.walk_frame == 1
        enemy.update(0.15)
        assert enemy.phase.walk_frame == 0

    def test_snaps_to_cover_and_hides(self, make_enemy):
        enemy = make_enemy(speed=127)
        settle_enemy(enemy, "hiding")

        assert enemy.pos.x == COVERS[0].x
        assert not enemy.visible
        assert 0.4 <= enemy.phase.remaining <= 1.2

    def test_walks_right_when_cover_is_right_of_entry(self, make_enemy):
        enemy = make_enemy(speed=100, entry_x=0)
        enemy.update(0.1)
        assert enemy.pos.x == pytest.approx(10)

    def test_entering_enemy_is_not_hittable(self, make_enemy):
        assert not make_enemy().is_hittable


# ===========================================================
# Cover Cycle
# ===========================================================

class TestCoverCycle:

    def test_hiding_expires_into_warning_below_peek_height(self, make_enemy):
        enemy = make_enemy()
        enemy.phase = HidingPhase(0.1)
        enemy.update(0.2)

        assert isinstance(enemy.phase, WarningPhase)
        assert 0.45 <= enemy.phase.remaining <= 0.85
        assert enemy.pos.y == enemy.peek_y + 30
        assert enemy.is_hittable

    def test_warning_bobs_around_offset(self, make_enemy):
        enemy = make_enemy()
        enemy.phase = WarningPhase(1.0)
        enemy.update(0.01, now=0.3)

        assert abs(enemy.pos.y - (enemy.peek_y + 28)) <= 5 + 1e-9

    def test_warning_expires_into_peeking_at_peek_height(self, make_enemy):
        enemy = make_enemy()
        enemy.phase = WarningPhase(0.05)
        enemy.update(0.1)

        assert isinstance(enemy.phase, PeekingPhase)
        assert 0.85 <= enemy.phase.remaining <= 1.5
        assert enemy.pos.y == enemy.peek_y

    def test_peek_expiry_fires_once(self, make_enemy):
        enemy = make_enemy()
        shots = []
        enemy.on_fire = shots.append
        enemy.phase = PeekingPhase(0.05)

        enemy.update(0.1)
        enemy.update(0.1)

        assert shots == [enemy]
        assert isinstance(enemy.phase, ShootingPhase)

    def test_fire_without_callback_is_harmless(self, make_enemy):
        enemy = make_enemy()
        enemy.phase = PeekingPhase(0.01)
        enemy.update(0.1)
        assert enemy.phase_name == "shooting"

    def test_shooting_returns_to_hiding(self, make_enemy):
        enemy = make_enemy()
        enemy.phase = ShootingPhase(0.72)
        enemy.update(0.7)
        assert enemy.phase_name == "shooting"
        enemy.update(0.05)

        assert isinstance(enemy.phase, HidingPhase)
        assert 0.9 <= enemy.phase.remaining <= 2.0

    def test_full_cycle_reaches_every_phase(self, make_enemy):
        enemy = make_enemy()
        fired = []
        enemy.on_fire = fired.append

        for phase in ("hiding", "warning", "peeking", "shooting", "hiding"):
            settle_enemy(enemy, phase)

        assert len(fired) == 1


# ===========================================================
# Damage
# ===========================================================

class TestDamage:

    def test_wounded_enemy_retreats(self, make_enemy):
        enemy = make_enemy(hp=2)
        enemy.phase = PeekingPhase(1.0)

        killed = enemy.take_damage()

        assert killed is False
        assert enemy.hp == 1
        assert isinstance(enemy.phase, RetreatingPhase)
        assert enemy.phase.remaining == pytest.approx(0.45)

    def test_retreat_sinks_then_hides(self, make_enemy):
        enemy = make_enemy(hp=2)
        enemy.phase = PeekingPhase(1.0)
        enemy.take_damage()

        enemy.update(0.225)
        assert enemy.pos.y == pytest.approx(enemy.peek_y + 17.5)

        enemy.update(0.25)
        assert isinstance(enemy.phase, HidingPhase)
        assert 1.0 <= enemy.phase.remaining <= 2.5

    def test_fatal_hit_kills(self, make_enemy):
        enemy = make_enemy()
        enemy.phase = WarningPhase(0.5)

        assert enemy.take_damage() is True
        assert enemy.hp == 0
        assert isinstance(enemy.phase, DeadPhase)
        assert enemy.is_dead
        assert not enemy.is_hittable

    def test_second_kill_is_ignored(self, make_enemy):
        enemy = make_enemy()
        enemy.phase = PeekingPhase(1.0)
        enemy.take_damage()

        assert enemy.take_damage() is False
        assert enemy.hp == 0

    def test_dead_enemy_falls_and_becomes_removable(self, make_enemy):
        enemy = make_enemy()
        enemy.phase = PeekingPhase(1.0)
        enemy.take_damage()
        start_y = enemy.pos.y

        enemy.update(0.5)
        assert enemy.pos.y == pytest.approx(start_y + 27.5)
        assert not enemy.is_removable

        enemy.update(0.3)
        assert enemy.is_removable

    def test_dead_enemy_never_fires(self, make_enemy):
        enemy = make_enemy()
        fired = []
        enemy.on_fire = fired.append
        enemy.phase = PeekingPhase(0.05)
        enemy.take_damage()

        enemy.update(1.0)
        assert fired == []


# ===========================================================
# Hit-Test Eligibility
# ===========================================================

@pytest.mark.parametrize("phase, hittable", [
    (EnteringPhase(), False),
    (HidingPhase(1.0), False),
    (WarningPhase(1.0), True),
    (PeekingPhase(1.0), True),
    (ShootingPhase(1.0), True),
    (RetreatingPhase(0.45, 0.45), True),
    (DeadPhase(0.75), False),
])
def test_hittable_only_when_showing_above_cover(make_enemy, phase, hittable):
    enemy = make_enemy()
    enemy.phase = phase
    assert enemy.is_hittable is hittable
