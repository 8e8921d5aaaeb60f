"""
test_wave_director.py
---------------------
Unit tests for spawn pacing and wave progression.

Responsibilities
----------------
- Verify the per-wave formulas (target, interval, hp, speed, live cap).
- Verify the gated spawn countdown and free-cover selection.
- Verify kill counting and the once-per-wave clear signal.
- Verify the banner fade curve.
"""

import random

import pytest

from saloon.entities.cover import COVERS
from saloon.entities.entity_state import DeadPhase
from saloon.systems.level.wave_director import WaveDirector


# ===========================================================
# Formulas
# ===========================================================

class TestWaveFormulas:

    @pytest.mark.parametrize("wave, target", [(1, 7), (2, 9), (5, 15)])
    def test_target_grows_by_two(self, director, wave, target):
        assert director.target_for(wave) == target

    def test_interval_shrinks_to_floor(self, director):
        assert director.interval_for(1) == pytest.approx(2.78)
        assert director.interval_for(5) == pytest.approx(1.9)
        assert director.interval_for(9) == pytest.approx(1.1)
        assert director.interval_for(30) == pytest.approx(1.1)

    def test_tough_enemies_from_wave_three(self, director):
        assert director.hp_for(1) == 1
        assert director.hp_for(2) == 1
        assert director.hp_for(3) == 2
        assert director.hp_for(8) == 2

    def test_speed_scales_with_wave(self, director):
        assert director.speed_for(1) == 127
        assert director.speed_for(4) == 163

    @pytest.mark.parametrize("wave, cap", [(1, 2), (2, 3), (3, 3), (4, 4), (10, 4)])
    def test_live_cap_bounded_by_cover_count(self, director, wave, cap):
        director.wave = wave
        assert director.max_active == cap

    def test_initial_state(self, director):
        assert director.wave == 1
        assert director.target == 7
        assert director.spawned == 0
        assert director.kills == 0
        assert director.spawn_timer == pytest.approx(2.0)
        assert director.banner_timer == 0.0


# ===========================================================
# Spawning
# ===========================================================

class TestSpawning:

    def test_first_spawn_after_opening_delay(self, director):
        assert director.update(1.0, []) is None
        enemy = director.update(1.0, [])

        assert enemy is not None
        assert director.spawned == 1
        assert enemy.phase_name == "entering"
        assert enemy.hp == 1

    def test_timer_rearms_with_jitter(self, director):
        director.spawn_timer = 0.01
        director.update(0.02, [])

        assert 2.78 <= director.spawn_timer <= 2.78 + 0.8

    def test_countdown_paused_at_live_cap(self, director, make_enemy):
        enemies = [make_enemy(COVERS[0]), make_enemy(COVERS[1])]
        director.spawn_timer = 0.5

        assert director.update(1.0, enemies) is None
        assert director.spawn_timer == pytest.approx(0.5)

    def test_all_covers_taken_leaves_countdown_alone(self, director, make_enemy):
        director.wave = 4
        enemies = [make_enemy(cover) for cover in COVERS]
        director.spawn_timer = 0.5

        assert director.update(1.0, enemies) is None
        assert director.spawn_timer == pytest.approx(0.5)
        assert director.spawned == 0

    def test_countdown_paused_when_wave_budget_spent(self, director):
        director.spawned = director.target
        director.spawn_timer = 0.5

        assert director.update(1.0, []) is None
        assert director.spawn_timer == pytest.approx(0.5)

    def test_dead_enemies_free_their_cover(self, director, make_enemy):
        corpse = make_enemy(COVERS[2])
        corpse.phase = DeadPhase(0.75)

        free_ids = [cover.id for cover in director.free_covers([corpse])]

        assert free_ids == [0, 1, 2, 3]
        assert director.active_count([corpse]) == 0

    def test_spawn_never_picks_occupied_cover(self, director, make_enemy):
        enemies = [make_enemy(COVERS[0]), make_enemy(COVERS[1]), make_enemy(COVERS[3])]

        enemy = director.try_spawn(enemies)

        assert enemy.cover_id == 2

    def test_no_free_cover_changes_nothing(self, director, make_enemy):
        enemies = [make_enemy(cover) for cover in COVERS]

        assert director.try_spawn(enemies) is None
        assert director.spawned == 0

    def test_tough_wave_spawns_two_hp_enemies(self, director):
        director.wave = 3
        enemy = director.try_spawn([])
        assert enemy.hp == enemy.max_hp == 2


# ===========================================================
# Progression
# ===========================================================

class TestProgression:

    def test_clear_signalled_once(self, director):
        results = [director.register_kill() for _ in range(9)]
        assert results.count(True) == 1
        assert results[6] is True

    def test_advance_resets_counters(self, director):
        director.spawned = 7
        for _ in range(7):
            director.register_kill()

        director.advance()

        assert director.wave == 2
        assert director.target == 9
        assert director.kills == 0
        assert director.spawned == 0
        assert director.spawn_timer == pytest.approx(1.8)
        assert director.spawn_interval == pytest.approx(2.56)
        assert director.banner_timer == pytest.approx(2.6)
        assert not director.advance_pending

    def test_reset_returns_to_wave_one(self, director):
        director.advance()
        director.advance()
        director.reset()

        assert director.wave == 1
        assert director.target == 7
        assert director.banner_timer == 0.0


# ===========================================================
# Banner
# ===========================================================

class TestBanner:

    def test_hidden_without_advance(self, director):
        assert director.banner_alpha == 0.0
        assert not director.banner_visible

    def test_fades_in_holds_and_fades_out(self, director):
        director.advance()
        assert director.banner_alpha == 0.0

        director.update(0.1, [])
        assert director.banner_alpha == pytest.approx(0.16)

        director.update(1.2, [])
        assert director.banner_alpha == pytest.approx(1.0)

        director.update(1.2, [])
        assert director.banner_alpha == pytest.approx(0.16)

        director.update(0.2, [])
        assert director.banner_alpha == 0.0


# ===========================================================
# Occupancy Invariant
# ===========================================================

@pytest.mark.slow
def test_live_enemies_never_exceed_cap_or_share_cover(gameplay_config):
    rng = random.Random(99)
    director = WaveDirector(gameplay_config["wave"], gameplay_config["enemy"], rng)
    enemies = []

    for step in range(6000):
        spawned = director.update(0.05, enemies)
        if spawned is not None:
            enemies.append(spawned)

        # Kill someone now and then; roll the wave over when cleared
        live = [e for e in enemies if not e.is_dead]
        if live and rng.random() < 0.03:
            victim = rng.choice(live)
            victim.phase = DeadPhase(0.0)
            if director.register_kill():
                director.advance()
                enemies.clear()
        enemies = [e for e in enemies if not e.is_dead]

        live_covers = [e.cover_id for e in enemies if not e.is_dead]
        assert len(live_covers) <= director.max_active
        assert len(live_covers) == len(set(live_covers))
        assert director.spawned <= director.target
