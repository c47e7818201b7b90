"""Tests for the radial package."""
import itertools
import math

import pytest


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def people():
    """Twelve contacts with urgency 1..5."""
    from forces import Entity
    weights = [5, 4, 3, 5, 4, 2, 3, 1, 4, 2, 5, 3]
    return [Entity(str(i + 1), f'person {i + 1}', weight=w) for i, w in enumerate(weights)]


@pytest.fixture
def placed(people):
    from radial import place_radially
    return place_radially(1400, 900, people)


# ---------------------------------------------------------------------------
# Geometry helpers
# ---------------------------------------------------------------------------

class TestHelpers:

    def test_ball_radius(self):
        from radial import ball_radius
        assert ball_radius(1) == 35
        assert ball_radius(5) == 75

    def test_default_obstacle(self):
        from radial import default_obstacle
        assert default_obstacle(1400, 900).width == 400
        assert default_obstacle(500, 900).width == pytest.approx(300)
        assert default_obstacle(500, 900).height == 80

    def test_distance_to_rectangle(self):
        from radial import Obstacle, distance_to_rectangle
        obs = Obstacle(200, 100)
        assert distance_to_rectangle(500, 500, obs, 500, 500) == 0.0
        assert distance_to_rectangle(650, 500, obs, 500, 500) == pytest.approx(50.0)
        # corner: (600, 550) -> (630, 590) is 30, 40 away
        assert distance_to_rectangle(630, 590, obs, 500, 500) == pytest.approx(50.0)


# ---------------------------------------------------------------------------
# Placement tests
# ---------------------------------------------------------------------------

class TestPlaceRadially:

    def test_one_node_per_entity_in_order(self, people, placed):
        assert [b.id for b in placed] == [p.id for p in people]
        assert [b.radius for b in placed] == [25 + p.weight * 10 for p in people]

    def test_non_overlap(self, placed):
        regular = [b for b in placed if not b.fallback]
        for a, b in itertools.combinations(regular, 2):
            d = math.hypot(a.x - b.x, a.y - b.y)
            assert d >= a.radius + b.radius + 10 - 1e-9

    def test_obstacle_clearance(self, placed):
        from radial import default_obstacle, distance_to_rectangle
        obs = default_obstacle(1400, 900)
        for b in placed:
            if b.fallback:
                continue
            assert distance_to_rectangle(b.x, b.y, obs, 700, 450) >= b.radius + 20 - 1e-9

    def test_viewport_margin(self, placed):
        for b in placed:
            if b.fallback:
                continue
            assert b.x - b.radius >= 50 - 1e-9
            assert b.x + b.radius <= 1400 - 50 + 1e-9
            assert b.y - b.radius >= 50 - 1e-9
            assert b.y + b.radius <= 900 - 50 + 1e-9

    def test_first_candidate_in_scan_order(self):
        from forces import Entity
        from radial import Obstacle, place_radially
        nodes = place_radially(2000, 2000, [Entity('1', 'Dad', weight=1)], Obstacle(10, 10))
        assert nodes[0].x == pytest.approx(1100.0)
        assert nodes[0].y == pytest.approx(1000.0)
        assert not nodes[0].fallback

    def test_custom_obstacle_center(self):
        from forces import Entity
        from radial import Obstacle, place_radially
        nodes = place_radially(2000, 2000, [Entity('1', 'Dad', weight=1)],
                               Obstacle(10, 10, x=500, y=500))
        assert (nodes[0].x, nodes[0].y) == pytest.approx((600.0, 500.0))

    def test_fallback_when_no_room(self):
        from forces import Entity
        from radial import place_radially
        nodes = place_radially(300, 300, [Entity('1', 'a'), Entity('2', 'b')])
        assert all(b.fallback for b in nodes)
        assert (nodes[0].x, nodes[0].y) == pytest.approx((250.0, 150.0))
        d = 130 / math.sqrt(2)
        assert (nodes[1].x, nodes[1].y) == pytest.approx((150 + d, 150 + d))

    def test_deterministic(self, people):
        from radial import place_radially
        a = place_radially(1400, 900, people)
        b = place_radially(1400, 900, people)
        assert a == b

    def test_empty(self):
        from radial import place_radially
        assert place_radially(800, 600, []) == []

    def test_non_positive_radius_rejected(self):
        from forces import Entity
        from radial import place_radially
        with pytest.raises(ValueError):
            place_radially(800, 600, [Entity('1', 'x', weight=-3)])

    def test_to_dict(self, placed):
        d = placed[0].to_dict()
        assert set(d) == {'id', 'label', 'weight', 'radius', 'x', 'y', 'fallback'}
