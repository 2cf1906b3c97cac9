import pytest

from phongrt.core.matrix import Matrix
from phongrt.core.ray import Ray
from phongrt.core.tuples import point, vector


def test_at():
    ray = Ray(point(2, 3, 4), vector(1, 0, 0))
    assert ray.at(0) == point(2, 3, 4)
    assert ray.at(1) == point(3, 3, 4)
    assert ray.at(-1) == point(1, 3, 4)
    assert ray.at(2.5) == point(4.5, 3, 4)


def test_at_zero_and_one(rng):
    for values in rng.uniform(-5, 5, size=(20, 6)):
        o = point(*(float(v) for v in values[:3]))
        d = vector(*(float(v) for v in values[3:]))
        ray = Ray(o, d)
        assert ray.at(0) == o
        assert ray.at(1) == o + d


def test_translate():
    ray = Ray(point(1, 2, 3), vector(0, 1, 0))
    moved = ray.transform(Matrix.translation(3, 4, 5))
    assert moved == Ray(point(4, 6, 8), vector(0, 1, 0))


def test_scale_keeps_direction_unnormalized():
    ray = Ray(point(1, 2, 3), vector(0, 1, 0))
    scaled = ray.transform(Matrix.scaling(2, 3, 4))
    assert scaled.origin == point(2, 6, 12)
    assert scaled.direction == vector(0, 3, 0)
    assert scaled.direction.norm() == pytest.approx(3)


def test_transform_does_not_mutate():
    ray = Ray(point(1, 2, 3), vector(0, 1, 0))
    ray.transform(Matrix.translation(3, 4, 5))
    assert ray == Ray(point(1, 2, 3), vector(0, 1, 0))
