"""Tests for the AVL name index adapter."""

import math

import pytest

from wordgraph.adapters.index import AVLNameIndex


class TestAVLNameIndex:
    """Test suite for AVLNameIndex."""

    @pytest.fixture
    def index(self):
        idx = AVLNameIndex()
        for v, word in enumerate(["cat", "bat", "bad", "bed", "cot"]):
            idx.insert(word, v)
        return idx

    def test_empty_index(self):
        idx = AVLNameIndex()
        assert len(idx) == 0
        assert idx.height() == -1
        assert idx.lookup("cat") is None
        assert list(idx) == []

    def test_lookup_exact_match(self, index):
        assert index.lookup("cat") == 0
        assert index.lookup("bad") == 2
        assert index.lookup("cot") == 4

    def test_lookup_is_not_fuzzy(self, index):
        assert index.lookup("ca") is None
        assert index.lookup("cats") is None
        assert index.lookup("Cat") is None
        assert index.lookup("") is None

    def test_iteration_is_sorted(self, index):
        assert list(index) == [
            ("bad", 2),
            ("bat", 1),
            ("bed", 3),
            ("cat", 0),
            ("cot", 4),
        ]

    def test_reinsert_replaces_id(self, index):
        index.insert("bat", 9)

        assert index.lookup("bat") == 9
        assert len(index) == 5

    def test_contains(self, index):
        assert "bed" in index
        assert "bud" not in index
        assert 3 not in index

    def test_sorted_inserts_stay_balanced(self):
        idx = AVLNameIndex()
        n = 1000
        for v in range(n):
            idx.insert(f"word{v:05d}", v)

        assert len(idx) == n
        assert idx.height() <= 1.45 * math.log2(n + 2)
        assert all(idx.lookup(f"word{v:05d}") == v for v in range(n))

    def test_reverse_inserts_stay_balanced(self):
        idx = AVLNameIndex()
        n = 512
        for v in reversed(range(n)):
            idx.insert(f"{v:04d}", v)

        assert idx.height() <= 1.45 * math.log2(n + 2)
        assert [v for _, v in idx] == list(range(n))

    def test_codepoint_ordering(self):
        idx = AVLNameIndex()
        for v, word in enumerate(["b", "B", "a", "é"]):
            idx.insert(word, v)

        assert [key for key, _ in idx] == ["B", "a", "b", "é"]
