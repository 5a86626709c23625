import pytest

from graph import Vertex


@pytest.fixture
def abc():
    """A(1) → B(2) → C(3), plus the shortcut A → C."""
    a, b, c = Vertex(1), Vertex(2), Vertex(3)
    a.add_neighbor(b).add_neighbor(c)
    b.add_neighbor(c)
    return a, b, c


@pytest.fixture
def self_loop():
    x = Vertex(5)
    x.add_neighbor(x)
    return x


@pytest.fixture
def disconnected():
    """P(1) → Q(2), and R(9) on its own."""
    p, q, r = Vertex(1), Vertex(2), Vertex(9)
    p.add_neighbor(q)
    return p, q, r


@pytest.fixture
def cycle():
    """1 → 3 → 5 → 1, with 5 → 7 hanging off the loop."""
    v1, v3, v5, v7 = Vertex(1), Vertex(3), Vertex(5), Vertex(7)
    v1.add_neighbor(v3)
    v3.add_neighbor(v5)
    v5.add_neighbor(v1).add_neighbor(v7)
    return v1, v3, v5, v7
