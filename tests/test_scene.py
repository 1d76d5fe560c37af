import logging

import pytest

from funhouse.config import MIN_SCALE, Bounds, Color
from funhouse.geom import dist, point, vclose
from funhouse.scene import Curve, Sphere
## unit tests for funhouse scene.py

RED = Color(1.0, 0.0, 0.0)
UNIT_BOUNDS = Bounds(left=-1.0, right=1.0, bottom=-1.0, top=1.0)


def _inside(s, b, tol=1e-12):
    """is the sphere's footprint within bounds ``b``"""
    x, y, r = s.position[0], s.position[1], s.radius
    return (r > 0 and
            x - r >= b.left - tol and x + r <= b.right + tol and
            y - r >= b.bottom - tol and y + r <= b.top + tol)


class TestSphere:

    def test_create(self):
        p = point(0.2, 0.3, -1.0)
        s = Sphere(RED, p)
        assert s.radius == MIN_SCALE
        assert s.color == RED
        assert s.position == p
        assert s.position is not p

    def test_color_triple(self):
        s = Sphere((0.0, 0.5, 1.0), point(0, 0))
        assert s.color == Color(0.0, 0.5, 1.0)
        with pytest.raises(ValueError):
            Sphere((2.0, 0.0, 0.0), point(0, 0))

    def test_resize_clamps_to_bounds(self):
        s = Sphere(RED, point(0, 0, 0))
        assert s.resize(5, UNIT_BOUNDS) == pytest.approx(1.0)
        assert s.radius == pytest.approx(1.0)

    def test_resize_nearest_side_wins(self):
        s = Sphere(RED, point(0.5, -0.2, 0))
        s.resize(5, UNIT_BOUNDS)
        assert s.radius == pytest.approx(0.5)

    def test_resize_minimum(self):
        s = Sphere(RED, point(0, 0, 0))
        s.resize(0.5, UNIT_BOUNDS)
        s.resize(-3.0, UNIT_BOUNDS)
        assert s.radius == pytest.approx(MIN_SCALE)

    def test_resize_bounds_forms(self):
        s = Sphere(RED, point(0, 0, 0))
        s.resize(5, {'left': -2, 'right': 2, 'bottom': -0.5, 'top': 3})
        assert s.radius == pytest.approx(0.5)
        s.resize(5, (-0.25, 1, -1, 1))
        assert s.radius == pytest.approx(0.25)

    def test_move_to_clamps(self):
        s = Sphere(RED, point(0, 0, 0))
        s.resize(0.25, UNIT_BOUNDS)
        p = s.move_to(point(5, -5, 2), UNIT_BOUNDS)
        assert vclose(p, point(0.75, -0.75, 2))
        assert vclose(s.position, p)

    def test_move_to_leaves_argument(self):
        s = Sphere(RED, point(0, 0, 0))
        target = point(5, 5, 0)
        result = s.move_to(target, UNIT_BOUNDS)
        assert target == [5, 5, 0, 1]
        assert result is not target
        result[0] = 100.0
        assert s.position[0] == pytest.approx(1.0 - MIN_SCALE)

    def test_move_to_idempotent(self):
        s = Sphere(RED, point(0, 0, 0))
        s.resize(0.3, UNIT_BOUNDS)
        for target in (point(3, 0.2), point(-0.9, -4), point(0.1, 0.2), point(-2, 2, 1)):
            once = s.move_to(target, UNIT_BOUNDS)
            twice = s.move_to(once, UNIT_BOUNDS)
            assert twice == once

    def test_footprint_stays_inside(self):
        s = Sphere(RED, point(0, 0, 0))
        s.resize(0.4, UNIT_BOUNDS)
        s.move_to(point(10, 10), UNIT_BOUNDS)
        x, y = s.position[0], s.position[1]
        assert x + s.radius <= UNIT_BOUNDS.right + 1e-12
        assert y + s.radius <= UNIT_BOUNDS.top + 1e-12
        s.resize(10, UNIT_BOUNDS)
        assert x - s.radius >= UNIT_BOUNDS.left - 1e-12
        assert y - s.radius >= UNIT_BOUNDS.bottom - 1e-12

    def test_resize_center_on_edge(self):
        s = Sphere(RED, point(1.0, 0))
        assert s.resize(0.5, UNIT_BOUNDS) == pytest.approx(MIN_SCALE)
        assert s.position[0] == pytest.approx(1.0 - MIN_SCALE)
        assert _inside(s, UNIT_BOUNDS)

    def test_resize_center_outside(self):
        s = Sphere(RED, point(3, 0))
        s.resize(0.5, UNIT_BOUNDS)
        assert s.radius == pytest.approx(MIN_SCALE)
        assert vclose(s.position, point(1.0 - MIN_SCALE, 0))
        assert not s.contains(point(3.5, 0))
        assert s.contains(point(0.9, 0))

    def test_resize_close_to_edge(self):
        s = Sphere(RED, point(-0.95, 0.97))
        s.resize(0.5, UNIT_BOUNDS)
        assert s.radius == pytest.approx(MIN_SCALE)
        assert vclose(s.position, point(-0.9, 0.9))

    def test_resize_narrow_bounds(self):
        narrow = Bounds(left=0.0, right=0.1, bottom=0.0, top=1.0)
        s = Sphere(RED, point(0.05, 0.5))
        s.resize(1.0, narrow)
        assert s.radius == pytest.approx(0.05)
        assert _inside(s, narrow)

    def test_empty_bounds(self):
        s = Sphere(RED, point(0, 0))
        with pytest.raises(ValueError):
            s.resize(1.0, (1, 1, -1, 1))
        with pytest.raises(ValueError):
            s.move_to(point(0, 0), (-1, 1, 1, -1))

    def test_move_to_shrinks_wide_sphere(self):
        s = Sphere(RED, point(0, 0))
        assert s.resize(3.0, (-3, 3, -3, 3)) == pytest.approx(3.0)
        p = s.move_to(point(0, 0), UNIT_BOUNDS)
        assert s.radius == pytest.approx(1.0)
        assert vclose(p, point(0, 0))
        assert _inside(s, UNIT_BOUNDS)
        p = s.move_to(point(2, 2), (-1, 1, -0.5, 0.5))
        assert s.radius == pytest.approx(0.5)
        assert vclose(p, point(0.5, 0))

    def test_resize_invariants_over_grid(self):
        coords = [-2.0, -1.0, -0.95, -0.5, 0.0, 0.3, 0.99, 1.0, 1.5]
        for x in coords:
            for y in coords:
                for scale in (-1.0, 0.0, 0.05, 0.3, 5.0):
                    s = Sphere(RED, point(x, y))
                    r = s.resize(scale, UNIT_BOUNDS)
                    assert r == s.radius
                    assert s.radius >= MIN_SCALE
                    assert _inside(s, UNIT_BOUNDS)

    def test_move_to_invariants_over_grid(self):
        targets = [-3.0, -1.0, -0.7, 0.0, 0.45, 1.0, 2.5]
        for radius in (MIN_SCALE, 0.5, 0.9, 3.0):
            for x in targets:
                for y in targets:
                    s = Sphere(RED, point(0, 0))
                    s.resize(radius, (-5, 5, -5, 5))
                    once = s.move_to(point(x, y), UNIT_BOUNDS)
                    assert s.radius >= MIN_SCALE
                    assert _inside(s, UNIT_BOUNDS)
                    assert s.move_to(once, UNIT_BOUNDS) == once

    def test_contains(self):
        s = Sphere(RED, point(0, 0, 0))
        assert s.contains(point(0.05, 0, 0))
        assert not s.contains(point(0.1, 0, 0))  # strict
        assert not s.contains(point(0.5, 0.5, 0))
        assert s.includes(point(0, 0.05, 0.05))

    def test_contains_monotone_under_growth(self):
        s = Sphere(RED, point(0, 0, 0))
        queries = [point(0.05, 0), point(0.0, 0.09), point(0.3, 0.3), point(0.9, 0)]
        before = [s.contains(q) for q in queries]
        old = s.radius
        s.resize(0.6, UNIT_BOUNDS)
        assert s.radius >= old
        after = [s.contains(q) for q in queries]
        for b, a in zip(before, after):
            assert a or not b


def _arch():
    return [point(0, 0, 0), point(1, 1, 0), point(2, 0, 0)]


class TestCurve:

    def test_create(self):
        ctrl = _arch()
        c = Curve(ctrl)
        assert c.control_points is ctrl
        assert not c.compiled
        assert c.samples == []

    def test_create_wrong_count(self):
        with pytest.raises(ValueError):
            Curve([point(0, 0), point(1, 1)])
        with pytest.raises(ValueError):
            Curve([point(0, 0)] * 4)
        with pytest.raises(ValueError):
            Curve([])

    def test_compile(self):
        c = Curve(_arch())
        c.compile()
        assert c.compiled
        assert len(c.samples) > 3
        assert c.samples[0] == [0, 0, 0, 1]
        assert c.samples[-1] == [2, 0, 0, 1]

    def test_symmetric_polyline(self):
        c = Curve(_arch())
        samples = c.points
        n = len(samples)
        assert samples[0] is c.control_points[0]
        assert samples[-1] is c.control_points[2]
        for i in range(n):
            assert samples[i][0] == pytest.approx(2.0 - samples[n - 1 - i][0], abs=1e-12)
            assert samples[i][1] == pytest.approx(samples[n - 1 - i][1], abs=1e-12)

    def test_compile_idempotent(self):
        c = Curve(_arch())
        first = list(c.points)
        second = list(c.points)
        assert first == second
        c.invalidate()
        assert not c.compiled
        assert c.points == first

    def test_compiled_is_noop(self):
        c = Curve(_arch())
        c.compile()
        samples = c.samples
        c.compile()
        assert c.samples is samples

    def test_invalidate_idempotent(self):
        c = Curve(_arch())
        c.invalidate()
        c.invalidate()
        assert not c.compiled
        c.compile()
        c.update()
        assert not c.compiled

    def test_stale_until_invalidated(self):
        ctrl = _arch()
        c = Curve(ctrl)
        old = [list(p) for p in c.points]
        # editing in place without invalidate keeps the old samples
        ctrl[1][1] = -1.0
        assert [list(p) for p in c.points[1:-1]] == old[1:-1]
        c.invalidate()
        fresh = c.points
        assert fresh[len(fresh) // 2][1] < 0.0

    def test_length_and_evaluate(self):
        c = Curve(_arch())
        assert c.length() >= dist(c.control_points[0], c.control_points[2])
        assert vclose(c.evaluate(0.5), point(1.0, 0.5))

    def test_flat_curve_not_subdivided(self):
        ctrl = [point(0, 0), point(1, 0), point(2, 0)]
        c = Curve(ctrl)
        assert c.points == ctrl

    def test_degenerate_curve(self):
        ctrl = [point(1, 1), point(2, 3), point(1, 1)]
        c = Curve(ctrl)
        assert c.points == ctrl

    def test_smoothness_option(self):
        coarse = Curve(_arch(), smoothness=10.0)
        fine = Curve(_arch(), smoothness=5000.0)
        assert len(coarse.points) < len(fine.points)

    def test_compile_logs(self, caplog):
        c = Curve(_arch())
        with caplog.at_level(logging.DEBUG, logger="funhouse.scene"):
            c.compile()
        assert "Compiled curve into" in caplog.text

    def test_pick(self):
        c = Curve([point(0, 0, 0), point(1, 0, 0), point(2, 0, 0)])
        assert c.pick_control_point(point(0.05, 0, 0)) == 0
        assert c.pick_control_point(point(1.1, 0.1, 0)) == 1
        assert c.pick_control_point(point(2, 0, 0.15)) == 2
        assert c.pick_control_point(point(5, 5, 5)) is None
        # just beyond the select distance
        assert c.pick_control_point(point(0, 0.25, 0)) is None

    def test_pick_nearest(self):
        c = Curve([point(0, 0), point(0.3, 0), point(5, 5)])
        assert c.pick_control_point(point(0.2, 0)) == 1
        assert c.choose_control_point(point(0.1, 0)) == 0

    def test_pick_tie_goes_to_first(self):
        c = Curve([point(-0.1, 0), point(0.1, 0), point(5, 5)])
        assert c.pick_control_point(point(0, 0)) == 0
        c2 = Curve([point(5, 5), point(0, 0.1), point(0, -0.1)])
        assert c2.pick_control_point(point(0, 0)) == 1

    def test_pick_sees_edits(self):
        ctrl = _arch()
        c = Curve(ctrl)
        ctrl[2][0] = 10.0
        assert c.pick_control_point(point(10, 0)) == 2
