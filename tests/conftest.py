"""
conftest.py
-----------
Shared pytest configuration and fixtures for Saloon Shootout tests.

Contains:
- Headless SDL setup so pygame works without a display
- Logging switched off for every test
- Common session / enemy / director fixtures
- Pytest markers and collection hooks
"""

import os
import random
import sys

# Must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from saloon.core.debug.debug_logger import LoggerConfig
from saloon.core.runtime.gameplay_config import load_gameplay_config
from saloon.entities.cover import COVERS
from saloon.entities.enemies.enemy import Enemy
from saloon.graphics.particles.particle_manager import DEFAULT_PRESETS
from saloon.scenes.game_session import GameSession
from saloon.systems.level.wave_director import WaveDirector


# ===========================================================
# Global Test Setup
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep test output clean."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def rng():
    """Deterministic RNG shared by the object under test."""
    return random.Random(1234)


@pytest.fixture
def gameplay_config():
    """Fresh gameplay config (packaged gameplay.json merged over defaults)."""
    return load_gameplay_config()


@pytest.fixture
def enemy_config(gameplay_config):
    return gameplay_config["enemy"]


@pytest.fixture
def make_enemy(enemy_config, rng):
    """Factory for enemies at a given cover, defaulting to cover 0."""
    def _make(cover=COVERS[0], hp=1, **kwargs):
        return Enemy(cover, hp=hp, config=enemy_config, rng=rng, **kwargs)
    return _make


@pytest.fixture
def director(gameplay_config, rng):
    return WaveDirector(gameplay_config["wave"], gameplay_config["enemy"], rng)


@pytest.fixture
def session(gameplay_config, rng):
    """Session on the title screen."""
    return GameSession(config=gameplay_config, rng=rng, particle_presets=DEFAULT_PRESETS)


@pytest.fixture
def active_session(session):
    """Session that has just been started."""
    session.start()
    return session


# ===========================================================
# Test Helpers
# ===========================================================

def run_for(session, seconds, dt=1 / 60):
    """Step a session for roughly `seconds` of game time."""
    steps = int(round(seconds / dt))
    for _ in range(steps):
        session.step(dt)


def settle_enemy(enemy, phase_name, max_time=20.0, dt=0.01):
    """Update an enemy until it reaches the named phase (or fail)."""
    elapsed = 0.0
    while enemy.phase_name != phase_name:
        enemy.update(dt, elapsed)
        elapsed += dt
        if elapsed > max_time:
            raise AssertionError(f"Enemy never reached '{phase_name}' (stuck in {enemy.phase_name})")
    return elapsed


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything outside the integration suites as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
