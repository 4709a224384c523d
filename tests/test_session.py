"""
Unit tests for BrowsingSession.
"""

import pytest

from wikiwalker.graph import InvalidTrajectoryError
from wikiwalker.session import BrowsingSession, Click


class TestBrowsingSession:
    """Test click recording within a session."""

    def test_starts_on_start_title(self):
        session = BrowsingSession("A")
        assert session.path == ["A"]
        assert session.current_title == "A"
        assert session.click_count == 0

    def test_record_click(self):
        session = BrowsingSession("A")
        session.record_click("B")
        session.record_click("C")
        assert session.path == ["A", "B", "C"]
        assert session.current_title == "C"
        assert session.click_count == 2
        assert session.clicks[1] == Click(from_title="B", to_title="C", step_number=2)

    def test_to_trajectory_is_copy(self):
        session = BrowsingSession("A")
        session.record_click("B")
        traj = session.to_trajectory()
        traj.append("Z")
        assert session.path == ["A", "B"]

    def test_commit_logs_clicks(self, chain_graph):
        session = BrowsingSession("A")
        session.record_click("B")
        session.record_click("C")
        session.commit(chain_graph)
        assert chain_graph.clickthroughs("A", "B") == 1
        assert chain_graph.clickthroughs("B", "C") == 1

    def test_commit_without_clicks_raises(self, chain_graph):
        with pytest.raises(InvalidTrajectoryError):
            BrowsingSession("A").commit(chain_graph)

    def test_commit_invalid_click_raises(self, chain_graph):
        """A click along a missing link is rejected and nothing is logged."""
        session = BrowsingSession("A")
        session.record_click("B")
        session.record_click("A")
        with pytest.raises(InvalidTrajectoryError):
            session.commit(chain_graph)
        assert chain_graph.total_clicks() == 0

    def test_commit_prefilled_path(self, chain_graph):
        """A session seeded with a multi-title path commits that path."""
        session = BrowsingSession("A", path=["A", "B"])
        assert session.click_count == 1
        session.commit(chain_graph)
        assert chain_graph.clickthroughs("A", "B") == 1
