"""
test_session_stats.py
---------------------
Unit tests for per-run score keeping.
"""

from saloon.core.runtime.session_stats import SessionStats


class TestSessionStats:

    def test_score_ignores_non_positive(self):
        stats = SessionStats()
        stats.add_score(100)
        stats.add_score(0)
        stats.add_score(-50)
        assert stats.score == 100

    def test_high_score_only_on_commit(self):
        stats = SessionStats()
        stats.add_score(300)
        assert stats.high_score == 0

        assert stats.commit_high_score() is True
        assert stats.high_score == 300
        assert stats.commit_high_score() is False

    def test_lower_score_does_not_replace_best(self):
        stats = SessionStats()
        stats.add_score(500)
        stats.commit_high_score()
        stats.reset()
        stats.add_score(200)

        assert stats.commit_high_score() is False
        assert stats.high_score == 500

    def test_reset_keeps_high_score(self):
        stats = SessionStats()
        stats.add_score(400)
        stats.add_kill()
        stats.add_shot(hit=True)
        stats.add_time(3.0)
        stats.commit_high_score()

        stats.reset()

        assert stats.score == 0
        assert stats.enemies_killed == 0
        assert stats.shots_fired == 0
        assert stats.run_time == 0.0
        assert stats.high_score == 400

    def test_accuracy(self):
        stats = SessionStats()
        assert stats.accuracy == 0.0
        stats.add_shot(hit=True)
        stats.add_shot(hit=False)
        assert stats.accuracy == 0.5
