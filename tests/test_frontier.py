"""Unit tests for the frontier containers."""

from src.core.frontier import FifoFrontier, LifoFrontier, PriorityFrontier


class TestOrdering:
    """Each frontier pops in its own order."""

    def test_fifo(self):
        """First in, first out."""
        f = FifoFrontier()
        for c in [(0, 0), (1, 0), (2, 0)]:
            f.push(c)
        assert [f.pop() for _ in range(3)] == [(0, 0), (1, 0), (2, 0)]
        assert len(f) == 0

    def test_lifo(self):
        """Last in, first out."""
        f = LifoFrontier()
        for c in [(0, 0), (1, 0), (2, 0)]:
            f.push(c)
        assert [f.pop() for _ in range(3)] == [(2, 0), (1, 0), (0, 0)]

    def test_priority_lowest_first(self):
        """Lower priority comes out first."""
        f = PriorityFrontier()
        f.push((0, 0), 5)
        f.push((1, 0), 1)
        f.push((2, 0), 3)
        assert [f.pop()[1] for _ in range(3)] == [(1, 0), (2, 0), (0, 0)]

    def test_priority_ties_in_insertion_order(self):
        """Equal priorities keep insertion order, whatever the coordinates."""
        f = PriorityFrontier()
        for c in [(9, 9), (0, 0), (5, 1)]:
            f.push(c, 2.0)
        assert [f.pop() for _ in range(3)] == [(2.0, (9, 9)), (2.0, (0, 0)), (2.0, (5, 1))]

    def test_truthiness_follows_length(self):
        """An empty frontier is falsy, so `while frontier:` works."""
        f = PriorityFrontier()
        assert not f
        f.push((0, 0), 0)
        assert f
