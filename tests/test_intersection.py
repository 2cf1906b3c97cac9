import math

import pytest

from phongrt.core.matrix import Matrix
from phongrt.core.ray import Ray
from phongrt.core.tuples import point, vector
from phongrt.geometry.intersection import EPSILON, HitRecord, Intersection, hit, sort_intersections
from phongrt.geometry.plane import Plane
from phongrt.geometry.sphere import Sphere


@pytest.fixture
def sphere():
    return Sphere()


def test_intersection_holds_t_and_shape(sphere):
    i = Intersection(3.5, sphere)
    assert i.t == 3.5
    assert i.shape is sphere


def test_intersections_are_equal_only_to_themselves(sphere):
    i1 = Intersection(1, sphere)
    i2 = Intersection(1, sphere)
    assert i1 == i1
    assert i1 != i2
    assert i1.id < i2.id


def test_hit_all_positive(sphere):
    i1, i2 = Intersection(1, sphere), Intersection(2, sphere)
    assert hit(sort_intersections([i2, i1])) == i1


def test_hit_some_negative(sphere):
    i1, i2 = Intersection(-1, sphere), Intersection(1, sphere)
    assert hit(sort_intersections([i2, i1])) == i2


def test_hit_all_negative(sphere):
    xs = sort_intersections([Intersection(-2, sphere), Intersection(-1, sphere)])
    assert hit(xs) is None


def test_hit_ignores_zero(sphere):
    assert hit([Intersection(0.0, sphere)]) is None


def test_hit_is_lowest_nonnegative(sphere):
    i1 = Intersection(5, sphere)
    i2 = Intersection(7, sphere)
    i3 = Intersection(-3, sphere)
    i4 = Intersection(2, sphere)
    assert hit(sort_intersections([i1, i2, i3, i4])) == i4


def test_sort_is_stable_for_equal_t(sphere):
    plane = Plane()
    a = Intersection(2.0, sphere)
    b = Intersection(2.0, plane)
    c = Intersection(1.0, sphere)
    assert sort_intersections([a, b, c]) == [c, a, b]
    assert hit(sort_intersections([b, a])) == b


def test_nan_is_never_a_hit(sphere):
    nan = Intersection(math.nan, sphere)
    good = Intersection(3.0, sphere)
    xs = sort_intersections([nan, good, Intersection(-1.0, sphere)])
    assert xs[-1] == nan
    assert hit(xs) == good
    assert hit([nan]) is None


def test_hit_record_outside(sphere):
    ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    i = Intersection(4, sphere)
    rec = HitRecord(i, ray)
    assert rec.t == i.t
    assert rec.shape is sphere
    assert rec.point == point(0, 0, -1)
    assert rec.eye == vector(0, 0, -1)
    assert rec.normal == vector(0, 0, -1)
    assert rec.inside is False


def test_hit_record_inside(sphere):
    ray = Ray(point(0, 0, 0), vector(0, 0, 1))
    rec = HitRecord(Intersection(1, sphere), ray)
    assert rec.point == point(0, 0, 1)
    assert rec.eye == vector(0, 0, -1)
    # normal flipped to face the eye
    assert rec.normal == vector(0, 0, -1)
    assert rec.inside is True


def test_inside_flag_matches_raw_normal_direction(rng):
    shape = Sphere(Matrix.scaling(2, 1, 1))
    for ox, oy, oz in rng.uniform(-0.5, 0.5, size=(20, 3)):
        for origin in (point(float(ox), float(oy), float(oz)), point(float(ox), float(oy), -10.0)):
            ray = Ray(origin, vector(0, 0, 1))
            first = hit(sort_intersections(shape.intersect(ray)))
            rec = HitRecord(first, ray)
            raw = shape.normal_at(rec.point)
            assert rec.inside == (raw.dot(rec.eye) < 0)
            assert rec.normal.dot(rec.eye) >= 0


def test_over_and_under_point():
    ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    shape = Sphere(Matrix.translation(0, 0, 1))
    rec = HitRecord(Intersection(5, shape), ray)
    assert rec.over_point.z < -EPSILON / 2
    assert rec.point.z > rec.over_point.z
    assert rec.under_point.z > EPSILON / 2
    assert rec.point.z < rec.under_point.z
    assert rec.over_point.is_point()
    assert rec.under_point.is_point()
