"""
wave_director.py
----------------
Decides when and where new enemies appear and when a wave is over.

Responsibilities
----------------
- Cap the number of live enemies by wave.
- Run the spawn countdown while there is room and budget to spawn.
- Pick a random free cover slot for every spawn attempt.
- Count kills toward the wave target and roll over to the next wave.
- Drive the "WAVE N" banner countdown.
"""

import math
import random

from saloon.core.debug.debug_logger import DebugLogger
from saloon.core.runtime.gameplay_config import DEFAULT_CONFIG
from saloon.core.utils.geometry import clamp
from saloon.entities.cover import COVERS
from saloon.entities.enemies.enemy import Enemy


class WaveDirector:
    """Spawn pacing and wave progression for one session."""

    def __init__(self, config=None, enemy_config=None, rng=None, covers=COVERS):
        """
        Args:
            config: "wave" section of the gameplay config
            enemy_config: "enemy" section, handed to spawned enemies
            rng: random.Random shared with the session
            covers: Cover slots enemies may occupy
        """
        self._config = config if config is not None else DEFAULT_CONFIG["wave"]
        self._enemy_config = enemy_config if enemy_config is not None else DEFAULT_CONFIG["enemy"]
        self._rng = rng or random.Random()
        self.covers = tuple(covers)
        self.reset()

    def reset(self):
        """Back to wave 1 with the opening spawn delay."""
        self.wave = 1
        self.spawned = 0
        self.kills = 0
        self.target = self.target_for(self.wave)
        self.spawn_interval = self.interval_for(self.wave)
        self.spawn_timer = self._config["first_spawn_delay"]
        self.banner_timer = 0.0
        self.advance_pending = False

    # ===========================================================
    # Wave Formulas
    # ===========================================================
    def target_for(self, wave: int) -> int:
        return self._config["base_target"] + self._config["target_per_wave"] * wave

    def interval_for(self, wave: int) -> float:
        return max(
            self._config["min_interval"],
            self._config["base_interval"] - self._config["interval_per_wave"] * wave,
        )

    def hp_for(self, wave: int) -> int:
        if wave >= self._config["tough_from_wave"]:
            return self._config["tough_hp"]
        return self._config["base_hp"]

    def speed_for(self, wave: int) -> float:
        return self._enemy_config["base_speed"] + self._enemy_config["speed_per_wave"] * wave

    @property
    def max_active(self) -> int:
        """Live-enemy cap: 2 + floor(0.6 * wave), kept within 1..number of covers."""
        cap = self._config["max_active_base"] + math.floor(self.wave * self._config["max_active_per_wave"])
        return int(clamp(cap, 1, len(self.covers)))

    # ===========================================================
    # Occupancy
    # ===========================================================
    @staticmethod
    def active_count(enemies) -> int:
        return sum(1 for enemy in enemies if not enemy.is_dead)

    def free_covers(self, enemies) -> list:
        """Cover slots with no live enemy assigned."""
        occupied = {enemy.cover_id for enemy in enemies if not enemy.is_dead}
        return [cover for cover in self.covers if cover.id not in occupied]

    def can_spawn(self, enemies) -> bool:
        return self.active_count(enemies) < self.max_active and self.spawned < self.target

    # ===========================================================
    # Update
    # ===========================================================
    def update(self, dt: float, enemies):
        """
        Tick the banner and the spawn countdown.

        The countdown only runs while a spawn would be allowed. When it
        expires it is re-armed with the interval plus jitter and one spawn
        is attempted.

        Returns:
            Enemy | None: The enemy to add to the session, if one spawned
        """
        if self.banner_timer > 0:
            self.banner_timer = max(0.0, self.banner_timer - dt)

        if not self.can_spawn(enemies):
            return None

        self.spawn_timer -= dt
        if self.spawn_timer > 0:
            return None

        self.spawn_timer = self.spawn_interval + self._rng.uniform(0, self._config["spawn_jitter"])
        return self.try_spawn(enemies)

    def try_spawn(self, enemies):
        """
        Create an enemy at a random free cover.

        Returns None without touching any counter when every slot is taken.
        """
        free = self.free_covers(enemies)
        if not free:
            DebugLogger.trace("Spawn skipped: no free cover", category="wave")
            return None

        cover = self._rng.choice(free)
        enemy = Enemy(
            cover,
            hp=self.hp_for(self.wave),
            speed=self.speed_for(self.wave),
            outfit=self._rng.randrange(self._enemy_config["outfits"]),
            config=self._enemy_config,
            rng=self._rng,
        )
        self.spawned += 1

        DebugLogger.state(
            f"Spawned enemy at cover {cover.id} | HP={enemy.hp} | "
            f"Wave {self.wave} ({self.spawned}/{self.target})",
            category="wave"
        )
        return enemy

    # ===========================================================
    # Progression
    # ===========================================================
    def register_kill(self) -> bool:
        """
        Count a kill toward the wave target.

        Returns:
            bool: True exactly once per wave, when the target is first reached
        """
        self.kills += 1
        if self.kills >= self.target and not self.advance_pending:
            self.advance_pending = True
            DebugLogger.state(f"Wave {self.wave} cleared", category="wave")
            return True
        return False

    def advance(self):
        """Start the next wave: new target and pace, fresh counters, banner on."""
        self.wave += 1
        self.spawned = 0
        self.kills = 0
        self.target = self.target_for(self.wave)
        self.spawn_interval = self.interval_for(self.wave)
        self.spawn_timer = self._config["next_wave_spawn_delay"]
        self.banner_timer = self._config["banner_duration"]
        self.advance_pending = False

        DebugLogger.state(
            f"Wave {self.wave} | Target={self.target} | Interval={self.spawn_interval:.2f}s "
            f"| Cap={self.max_active}",
            category="wave"
        )

    # ===========================================================
    # Banner
    # ===========================================================
    @property
    def banner_alpha(self) -> float:
        """Opacity ramps up, holds at 1, then ramps down over the banner duration."""
        duration = self._config["banner_duration"]
        remaining = self.banner_timer
        if not 0 < remaining < duration:
            return 0.0
        return clamp(min(remaining, duration - remaining) * self._config["banner_ramp"], 0.0, 1.0)

    @property
    def banner_visible(self) -> bool:
        return self.banner_alpha > 0
