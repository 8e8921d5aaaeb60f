"""
game_session.py
---------------
One saloon shoot-out: the top-level state machine and the per-frame step.

Session Flow:
    1. NOT_STARTED: title screen, only the start button reacts
    2. ACTIVE: waves spawn, enemies cycle through cover, the player shoots
    3. Last life lost -> short delay -> ENDED (game-over screen)
    4. Restart from ENDED (or ACTIVE) resets every dynamic structure

Step Order (ACTIVE):
    deferred effects -> visual timers -> reload -> spawn -> enemies -> particles

The session owns all mutable state. The host calls `step(dt)` once per
frame, forwards taps through `handle_input`, and draws `snapshot()`.
"""

import random

from saloon.core.debug.debug_logger import DebugLogger
from saloon.core.runtime.game_settings import Physics, UIRegions
from saloon.core.runtime.gameplay_config import load_gameplay_config
from saloon.core.runtime.scheduler import (
    EventScheduler,
    EnemyShotLands,
    WaveAdvance,
    AutoReload,
    SessionEnd,
)
from saloon.core.runtime.session_stats import SessionStats
from saloon.core.services.event_manager import (
    EventManager,
    SessionStartedEvent,
    SessionEndedEvent,
    WaveStartedEvent,
    EnemySpawnedEvent,
    EnemyHitEvent,
    EnemyKilledEvent,
    EnemyFiredEvent,
    PlayerHitEvent,
    ShotFiredEvent,
    ReloadStartedEvent,
    ReloadFinishedEvent,
)
from saloon.core.utils.geometry import clamp, point_in_rect, rect_center
from saloon.entities.cover import COVERS
from saloon.entities.entity_state import EnteringPhase
from saloon.entities.player.player_core import Player
from saloon.graphics.particles.particle_manager import ParticleManager
from saloon.scenes.scene_state import SessionMode
from saloon.scenes.session_snapshot import EnemyView, ParticleView, SessionSnapshot
from saloon.systems.level.wave_director import WaveDirector


class GameSession:
    """
    Explicitly constructed game instance.

    Several sessions can coexist (tests, replays); none of them touches
    global state.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config=None, rng=None, seed=None, particle_presets=None):
        """
        Args:
            config: Full gameplay config dict (loaded from gameplay.json if None)
            rng: random.Random driving every random draw of the session
            seed: Seed for a fresh RNG when `rng` is not given
            particle_presets: Particle presets (loaded from particles.json if None)
        """
        self.config = config if config is not None else load_gameplay_config()
        self.rng = rng or random.Random(seed)

        self.events = EventManager()
        self.scheduler = EventScheduler()
        self.stats = SessionStats()
        self.player = Player(self.config["player"])
        self.director = WaveDirector(self.config["wave"], self.config["enemy"], self.rng)
        self.particles = ParticleManager(particle_presets, self.rng)

        self.enemies = []
        self.mode = SessionMode.NOT_STARTED

        # Transient visuals
        self.time = 0.0
        self.hit_flash = 0.0
        self.door_swing = 0.0

        DebugLogger.init_entry("GameSession")

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def is_active(self) -> bool:
        return self.mode is SessionMode.ACTIVE

    @property
    def score(self) -> int:
        return self.stats.score

    @property
    def best_score(self) -> int:
        return self.stats.high_score

    @property
    def wave(self) -> int:
        return self.director.wave

    def hittable_enemies(self):
        return [enemy for enemy in self.enemies if enemy.is_hittable]

    # ===========================================================
    # Session Commands
    # ===========================================================

    def start(self):
        """Begin (or restart) a play-through from a clean slate."""
        self.scheduler.clear()
        self.stats.reset()
        self.player.reset()
        self.director.reset()
        self.enemies = []
        self.particles.clear()

        self.time = 0.0
        self.hit_flash = 0.0
        self.door_swing = 0.0

        self.mode = SessionMode.ACTIVE
        DebugLogger.state(f"Session started (best score {self.best_score})", category="session")
        self.events.dispatch(SessionStartedEvent(best_score=self.best_score))

    def handle_input(self, event):
        """Resolve a TapEvent immediately."""
        self.handle_tap(event.x, event.y)

    def handle_tap(self, x: float, y: float):
        """
        Map a tap in playfield coordinates to a command for the current mode.

        While reloading or with an empty cylinder, a tap anywhere counts as a
        reload request instead of a shot.
        """
        if self.mode is SessionMode.NOT_STARTED:
            if point_in_rect(x, y, UIRegions.START_BUTTON):
                self.start()
            return

        if self.mode is SessionMode.ENDED:
            if point_in_rect(x, y, UIRegions.RESTART_BUTTON):
                self.start()
            return

        if point_in_rect(x, y, UIRegions.RELOAD_BUTTON):
            self.request_reload()
            return

        if self.player.reloading or self.player.is_empty:
            self.request_reload()
        else:
            self.fire_at(x, y)

    def request_reload(self) -> bool:
        """Start a reload. Ignored while reloading, at full ammo, or outside play."""
        if not self.is_active:
            return False
        if not self.player.start_reload():
            return False

        self.events.dispatch(ReloadStartedEvent(duration=self.player.reload_time))
        return True

    def fire_at(self, x: float, y: float) -> bool:
        """
        Fire one round at (x, y).

        Returns:
            bool: True if a round was fired (hit or miss)
        """
        if not self.is_active or not self.player.consume_round():
            return False

        self.particles.muzzle_flash()

        # First match in spawn order wins
        target = next(
            (enemy for enemy in self.enemies
             if enemy.is_hittable and point_in_rect(x, y, enemy.hitbox())),
            None
        )
        if target is not None:
            self._damage_enemy(target)
        else:
            self.particles.bullet_hole(x, y)

        self.stats.add_shot(hit=target is not None)
        self.events.dispatch(ShotFiredEvent(
            position=(x, y), hit=target is not None, ammo_left=self.player.ammo
        ))

        if self.player.ammo == 0:
            self.scheduler.schedule(AutoReload(), self.config["player"]["auto_reload_delay"])

        return True

    def damage_player(self) -> bool:
        """
        Apply one enemy bullet to the player.

        Returns:
            bool: True if a life was lost
        """
        if not self.is_active or not self.player.is_alive:
            return False

        lives = self.player.lose_life()
        self.hit_flash = self.config["player"]["hit_flash"]
        self.events.dispatch(PlayerHitEvent(lives_left=lives))

        if lives == 0:
            if self.stats.commit_high_score():
                DebugLogger.action(f"New best score: {self.best_score}", category="session")
            self.scheduler.schedule(SessionEnd(), self.config["player"]["game_over_delay"])

        return True

    # ===========================================================
    # Combat Internals
    # ===========================================================

    def _damage_enemy(self, enemy):
        """Hit feedback, then retreat or death with scoring."""
        hit_x, hit_y = rect_center(enemy.hitbox())
        self.particles.impact(hit_x, hit_y)

        killed = enemy.take_damage(1)
        self.events.dispatch(EnemyHitEvent(
            cover_id=enemy.cover_id, position=(hit_x, hit_y), hp_left=enemy.hp
        ))

        if not killed:
            return

        points = self.config["enemy"]["score_per_wave"] * self.director.wave
        self.stats.add_score(points)
        self.stats.add_kill()
        self.events.dispatch(EnemyKilledEvent(
            cover_id=enemy.cover_id, position=(hit_x, hit_y), points=points
        ))

        if self.director.register_kill():
            self.scheduler.schedule(
                WaveAdvance(self.director.wave), self.config["wave"]["advance_delay"]
            )

    def _on_enemy_fire(self, enemy):
        """An enemy's peek ran out: muzzle flash now, damage after the bullet delay."""
        self.particles.enemy_flash(enemy.pos.x, enemy.pos.y)
        self.scheduler.schedule(EnemyShotLands(enemy), self.config["enemy"]["fire_delay"])
        self.events.dispatch(EnemyFiredEvent(
            cover_id=enemy.cover_id, position=(enemy.pos.x, enemy.pos.y)
        ))

    # ===========================================================
    # Deferred Effects
    # ===========================================================

    def _apply_effect(self, effect):
        """Apply a due effect if its target is still valid."""
        if isinstance(effect, EnemyShotLands):
            shooter = effect.enemy
            if shooter.is_dead:
                DebugLogger.trace("Enemy shot cancelled, shooter is dead", category="scheduler")
                return
            self.damage_player()

        elif isinstance(effect, WaveAdvance):
            if not self.is_active or effect.wave != self.director.wave:
                return
            self.director.advance()
            self.enemies.clear()
            self.events.dispatch(WaveStartedEvent(wave=self.director.wave, target=self.director.target))

        elif isinstance(effect, AutoReload):
            self.request_reload()

        elif isinstance(effect, SessionEnd):
            if not self.is_active or self.player.is_alive:
                return
            self.stats.commit_high_score()
            self.mode = SessionMode.ENDED
            DebugLogger.state(
                f"Session ended | Score={self.score} | Best={self.best_score} | Wave={self.wave}",
                category="session"
            )
            self.events.dispatch(SessionEndedEvent(
                score=self.score, best_score=self.best_score, wave=self.wave
            ))

        else:
            DebugLogger.warn(f"Unhandled deferred effect {type(effect).__name__}", category="scheduler")

    # ===========================================================
    # Step
    # ===========================================================

    def step(self, dt: float):
        """
        Advance the session by `dt` seconds (clamped to the max frame time).

        Deferred effects are released in every mode; the simulation itself
        only runs while ACTIVE.
        """
        dt = clamp(dt, 0.0, Physics.MAX_FRAME_TIME)

        for effect in self.scheduler.advance(dt):
            self._apply_effect(effect)

        if not self.is_active:
            return

        self.time += dt
        self.stats.add_time(dt)

        wave_config = self.config["wave"]
        player_config = self.config["player"]
        if self.door_swing > 0:
            self.door_swing = max(0.0, self.door_swing - dt * wave_config["door_swing_decay"])
        if self.hit_flash > 0:
            self.hit_flash = max(0.0, self.hit_flash - dt * player_config["hit_flash_decay"])

        if self.player.update(dt):
            self.events.dispatch(ReloadFinishedEvent(ammo=self.player.ammo))

        spawned = self.director.update(dt, self.enemies)
        if spawned is not None:
            self._add_enemy(spawned)

        for enemy in list(self.enemies):
            enemy.update(dt, self.time)
        self.enemies = [enemy for enemy in self.enemies if not enemy.is_removable]

        self.particles.update(dt)

    def _add_enemy(self, enemy):
        enemy.on_fire = self._on_enemy_fire
        self.enemies.append(enemy)
        self.door_swing = 1.0
        self.events.dispatch(EnemySpawnedEvent(cover_id=enemy.cover_id, hp=enemy.hp))

    # ===========================================================
    # Render Boundary
    # ===========================================================

    def snapshot(self) -> SessionSnapshot:
        """Frozen copy of everything the renderer needs for this frame."""
        enemies = tuple(
            EnemyView(
                cover_id=enemy.cover_id,
                x=enemy.pos.x,
                y=enemy.pos.y,
                phase=enemy.phase_name,
                visible=enemy.visible,
                hittable=enemy.is_hittable,
                hp=enemy.hp,
                max_hp=enemy.max_hp,
                outfit=enemy.outfit,
                walk_frame=enemy.phase.walk_frame if isinstance(enemy.phase, EnteringPhase) else 0,
                hitbox=enemy.hitbox(),
            )
            for enemy in self.enemies
        )
        particles = tuple(
            ParticleView(p.kind, p.x, p.y, p.lifetime, p.life_ratio)
            for p in self.particles
        )

        return SessionSnapshot(
            mode=self.mode,
            score=self.score,
            best_score=self.best_score,
            lives=self.player.lives,
            max_lives=self.player.max_lives,
            ammo=self.player.ammo,
            max_ammo=self.player.max_ammo,
            reloading=self.player.reloading,
            reload_progress=self.player.reload_progress,
            wave=self.director.wave,
            wave_kills=self.director.kills,
            wave_target=self.director.target,
            banner_alpha=self.director.banner_alpha,
            hit_flash=self.hit_flash,
            door_swing=self.door_swing,
            time=self.time,
            enemies=enemies,
            particles=particles,
            covers=COVERS,
        )
