import io

import pytest

from graph import Vertex
from traversal import (
    MIN_SENTINEL,
    InvalidArgumentError,
    all_odd,
    has_strictly_increasing_path,
    leaves,
    max_value,
    print_vertex_vals,
    reachable,
    visit_order,
    walk,
)


def make_chain(n):
    vertices = [Vertex(i) for i in range(n)]
    for prev, nxt in zip(vertices, vertices[1:]):
        prev.add_neighbor(nxt)
    return vertices


class TestWalk:

    def test_none_yields_nothing(self):
        assert list(walk(None)) == []

    def test_preorder_in_neighbour_order(self):
        root, left, right, deep = Vertex("r"), Vertex("l"), Vertex("x"), Vertex("d")
        root.add_neighbor(left).add_neighbor(right)
        left.add_neighbor(deep)
        assert visit_order(root) == ["r", "l", "d", "x"]

    def test_shared_vertex_visited_once(self, abc):
        assert visit_order(abc[0]) == [1, 2, 3]

    def test_cycle_terminates(self, cycle):
        assert visit_order(cycle[0]) == [1, 3, 5, 7]

    def test_deep_chain_does_not_recurse(self):
        chain = make_chain(5000)
        assert sum(1 for _ in walk(chain[0])) == 5000


class TestPrintVertexVals:

    def test_prints_each_value_once(self, abc, capsys):
        print_vertex_vals(abc[0])
        assert capsys.readouterr().out == "1\n2\n3\n"

    def test_none_prints_nothing(self, capsys):
        print_vertex_vals(None)
        assert capsys.readouterr().out == ""

    def test_cycle(self, cycle, capsys):
        print_vertex_vals(cycle[1])
        assert sorted(capsys.readouterr().out.split()) == ["1", "3", "5", "7"]

    def test_custom_stream(self):
        buf = io.StringIO()
        print_vertex_vals(Vertex("solo"), out=buf)
        assert buf.getvalue() == "solo\n"


class TestReachable:

    def test_scenario(self, abc):
        a, b, c = abc
        assert reachable(a) == {a, b, c}
        assert reachable(c) == {c}

    def test_none(self):
        assert reachable(None) == set()

    def test_self_loop(self, self_loop):
        assert reachable(self_loop) == {self_loop}

    def test_does_not_follow_edges_backwards(self, disconnected):
        p, q, r = disconnected
        assert reachable(q) == {q}
        assert r not in reachable(p)

    def test_equal_values_are_distinct_members(self):
        a, twin = Vertex(1), Vertex(1)
        a.add_neighbor(twin)
        assert reachable(a) == {a, twin}

    def test_idempotent(self, cycle):
        assert reachable(cycle[2]) == reachable(cycle[2]) == set(cycle)


class TestMaxValue:

    def test_scenario(self, abc):
        assert max_value(abc[0]) == 3
        assert max_value(abc[1]) == 3

    def test_none_is_sentinel(self):
        assert max_value(None) == MIN_SENTINEL == -2147483648

    def test_negative_values(self):
        a, b = Vertex(-5), Vertex(-3)
        a.add_neighbor(b)
        assert max_value(a) == -3

    def test_duplicate_values_do_not_hide_descendants(self):
        # a value-keyed visited set would stop at the second 5 and miss 9
        a, b, c = Vertex(5), Vertex(5), Vertex(9)
        a.add_neighbor(b)
        b.add_neighbor(c)
        assert max_value(a) == 9

    def test_values_below_sentinel(self):
        a, b = Vertex(-3_000_000_000), Vertex(-5_000_000_000)
        a.add_neighbor(b)
        assert max_value(a) == -3_000_000_000
        assert max_value(b) == -5_000_000_000

    def test_cycle(self, cycle):
        assert max_value(cycle[0]) == 7


class TestLeaves:

    def test_scenario(self, abc):
        assert leaves(abc[0]) == {abc[2]}

    def test_start_is_leaf(self):
        v = Vertex(1)
        assert leaves(v) == {v}

    def test_self_loop_is_not_leaf(self, self_loop):
        assert leaves(self_loop) == set()

    def test_none(self):
        assert leaves(None) == set()

    def test_subset_of_reachable(self, cycle):
        found = leaves(cycle[0])
        assert found == {cycle[3]}
        assert found <= reachable(cycle[0])
        assert all(not v.neighbors for v in found)


class TestAllOdd:

    def test_scenario(self, abc):
        assert all_odd(abc[0]) is False
        assert all_odd(abc[2]) is True

    def test_none_is_vacuously_true(self):
        assert all_odd(None) is True

    def test_self_loop(self, self_loop):
        assert all_odd(self_loop) is True

    def test_odd_cycle(self, cycle):
        assert all_odd(cycle[0]) is True

    def test_even_deep_in_cycle(self, cycle):
        cycle[3].add_neighbor(Vertex(8))
        assert all_odd(cycle[1]) is False

    def test_stops_at_first_even(self):
        # the vertex after the even one would blow up under % 2
        a, bad = Vertex(2), Vertex(object())
        a.add_neighbor(bad)
        assert all_odd(a) is False


class TestHasStrictlyIncreasingPath:

    def test_scenario(self, abc):
        a, b, c = abc
        assert has_strictly_increasing_path(a, c) is True
        assert has_strictly_increasing_path(c, a) is False

    def test_same_vertex(self, abc, self_loop):
        assert has_strictly_increasing_path(abc[1], abc[1]) is True
        assert has_strictly_increasing_path(self_loop, self_loop) is True

    def test_unreachable_target(self, disconnected):
        p, q, r = disconnected
        assert has_strictly_increasing_path(p, q) is True
        assert has_strictly_increasing_path(p, r) is False

    @pytest.mark.parametrize("which", ["start", "end", "both"])
    def test_none_rejected(self, abc, which):
        start = None if which in ("start", "both") else abc[0]
        end = None if which in ("end", "both") else abc[2]
        with pytest.raises(InvalidArgumentError) as exc:
            has_strictly_increasing_path(start, end)
        assert "must not be None" in str(exc.value)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            has_strictly_increasing_path(None, None)

    def test_equal_values_block_the_path(self):
        a, b, c = Vertex(1), Vertex(1), Vertex(2)
        a.add_neighbor(b)
        b.add_neighbor(c)
        assert has_strictly_increasing_path(a, c) is False

    def test_backtracks_to_later_neighbour(self):
        s, high, low, t = Vertex(1), Vertex(5), Vertex(2), Vertex(3)
        s.add_neighbor(high).add_neighbor(low)
        high.add_neighbor(t)
        low.add_neighbor(t)
        assert has_strictly_increasing_path(s, t) is True

    def test_decreasing_edge_into_target(self):
        a, b = Vertex(4), Vertex(1)
        a.add_neighbor(b)
        assert has_strictly_increasing_path(a, b) is False

    def test_cycle_terminates(self, cycle):
        v1, v3, v5, v7 = cycle
        assert has_strictly_increasing_path(v1, v7) is True
        assert has_strictly_increasing_path(v3, v1) is False

    def test_long_chain(self):
        chain = make_chain(3000)
        assert has_strictly_increasing_path(chain[0], chain[-1]) is True
        assert has_strictly_increasing_path(chain[-1], chain[0]) is False

    def test_diamond_chain_explores_each_vertex_once(self):
        # 40 diamonds in a row: 2**40 increasing paths, none ending at `unreachable`
        top = Vertex(0)
        first = top
        for i in range(40):
            left, right, nxt = Vertex(3 * i + 1), Vertex(3 * i + 2), Vertex(3 * i + 3)
            top.add_neighbor(left).add_neighbor(right)
            left.add_neighbor(nxt)
            right.add_neighbor(nxt)
            top = nxt
        unreachable = Vertex(10_000)
        assert has_strictly_increasing_path(first, unreachable) is False
        assert has_strictly_increasing_path(first, top) is True
