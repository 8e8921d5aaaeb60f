"""
session_stats.py
----------------
Score keeping for the current run plus the best score of the process.
"""


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run-specific statistics. Reset when starting a new game."""

    def __init__(self):
        self.score = 0
        self.high_score = 0
        self.enemies_killed = 0
        self.shots_fired = 0
        self.shots_hit = 0
        self.run_time = 0.0

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_score(self, amount: int):
        """Add to the current score. Negative amounts are ignored."""
        if amount > 0:
            self.score += amount

    def add_kill(self):
        self.enemies_killed += 1

    def add_shot(self, hit: bool):
        self.shots_fired += 1
        if hit:
            self.shots_hit += 1

    def add_time(self, dt: float):
        self.run_time += dt

    def commit_high_score(self) -> bool:
        """Raise the best score to the current score. Returns True on a new record."""
        if self.score > self.high_score:
            self.high_score = self.score
            return True
        return False

    @property
    def accuracy(self) -> float:
        if self.shots_fired == 0:
            return 0.0
        return self.shots_hit / self.shots_fired

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset all stats for new run. Preserves high score."""
        self.score = 0
        self.enemies_killed = 0
        self.shots_fired = 0
        self.shots_hit = 0
        self.run_time = 0.0
