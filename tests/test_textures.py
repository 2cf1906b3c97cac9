import math

import pytest

from phongrt.core.color import BLACK, WHITE, Color
from phongrt.core.matrix import Matrix
from phongrt.core.tuples import Tuple, point
from phongrt.geometry.sphere import Sphere
from phongrt.materials.textures import SolidColor, Stripe, Texture


class PositionTexture(Texture):
    """Maps a point straight to a color, so tests can see the point it received."""
    def color_at(self, point: Tuple) -> Color:
        return Color(point.x, point.y, point.z)


def test_default_transform_is_identity():
    texture = PositionTexture()
    assert texture.transform == Matrix.identity()
    assert texture.transform_inverse == Matrix.identity()


def test_assigning_transform_caches_inverse():
    texture = PositionTexture()
    texture.transform = Matrix.translation(1, 2, 3)
    assert texture.transform == Matrix.translation(1, 2, 3)
    assert texture.transform_inverse == Matrix.translation(1, 2, 3).inverse()


def test_mutating_assigned_matrix_leaves_texture_unchanged():
    m = Matrix.scaling(2, 2, 2)
    texture = PositionTexture()
    texture.transform = m
    m[0, 0] = 1.0
    assert texture.transform == Matrix.scaling(2, 2, 2)
    with pytest.raises(ValueError):
        texture.transform[0, 0] = 1.0
    assert texture.color_at_texture(point(2, 3, 4)) == Color(1, 1.5, 2)


def test_color_at_shape_with_shape_transformation():
    shape = Sphere(Matrix.scaling(2, 2, 2))
    color = PositionTexture().color_at_shape(point(2, 3, 4), shape)
    assert list(color) == pytest.approx([1, 1.5, 2])


def test_color_at_shape_with_texture_transformation():
    texture = PositionTexture()
    texture.transform = Matrix.scaling(2, 2, 2)
    color = texture.color_at_shape(point(2, 3, 4), Sphere())
    assert list(color) == pytest.approx([1, 1.5, 2])


def test_color_at_shape_with_both_transformations():
    shape = Sphere(Matrix.scaling(2, 2, 2))
    texture = PositionTexture()
    texture.transform = Matrix.translation(0.5, 1, 1.5)
    color = texture.color_at_shape(point(2.5, 3, 3.5), shape)
    assert list(color) == pytest.approx([0.75, 0.5, 0.25])


def test_solid_color_ignores_point_and_transform():
    red = Color(1, 0, 0)
    texture = SolidColor(red)
    texture.transform = Matrix.scaling(5, 5, 5)
    assert texture.color_at(point(0, 0, 0)) == red
    assert texture.color_at_shape(point(100, -3, 7), Sphere(Matrix.translation(1, 1, 1))) == red


def test_stripe_constant_in_y():
    stripe = Stripe.colors(WHITE, BLACK)
    for y in (0, 0.1, 0.2, 5.5):
        assert stripe.color_at(point(0, y, 0)) == WHITE


def test_stripe_constant_in_z():
    stripe = Stripe.colors(WHITE, BLACK)
    for z in (0, 0.1, 1.2):
        assert stripe.color_at(point(0, 0, z)) == WHITE


@pytest.mark.parametrize("x, expected", [
    (0.0, WHITE),
    (0.9, WHITE),
    (1.0, BLACK),
    (-0.1, BLACK),
    (-1.0, BLACK),
    (-1.1, WHITE),
    (2.5, WHITE),
])
def test_stripe_alternates_in_x_using_floor(x, expected):
    assert Stripe.colors(WHITE, BLACK).color_at(point(x, 0, 0)) == expected


def test_stripe_depends_only_on_x(rng):
    stripe = Stripe.colors(WHITE, BLACK)
    for x, y1, z1, y2, z2 in rng.uniform(-20, 20, size=(100, 5)):
        a = stripe.color_at(point(float(x), float(y1), float(z1)))
        b = stripe.color_at(point(float(x), float(y2), float(z2)))
        assert a == b


def test_stripe_with_shape_transformation():
    shape = Sphere(Matrix.scaling(2, 2, 2))
    assert Stripe.colors(WHITE, BLACK).color_at_shape(point(1.5, 0, 0), shape) == WHITE


def test_stripe_with_texture_transformation():
    stripe = Stripe.colors(WHITE, BLACK)
    stripe.transform = Matrix.scaling(2, 2, 2)
    assert stripe.color_at_shape(point(1.5, 0, 0), Sphere()) == WHITE


def test_stripe_with_both_transformations():
    stripe = Stripe.colors(WHITE, BLACK)
    stripe.transform = Matrix.translation(0.5, 0, 0)
    shape = Sphere(Matrix.scaling(2, 2, 2))
    assert stripe.color_at_shape(point(2.5, 0, 0), shape) == WHITE


def test_nested_stripes_compose_transforms():
    red, green, blue = Color(1, 0, 0), Color(0, 1, 0), Color(0, 0, 1)
    inner = Stripe.colors(red, green)
    inner.transform = Matrix.scaling(0.5, 1, 1)
    outer = Stripe(inner, SolidColor(blue))
    assert outer.color_at(point(0.3, 0, 0)) == red
    assert outer.color_at(point(0.6, 0, 0)) == green
    assert outer.color_at(point(1.3, 0, 0)) == blue


def test_rotated_stripe():
    stripe = Stripe.colors(WHITE, BLACK)
    stripe.transform = Matrix.rotation_y(math.pi / 2)
    # after rotating, stripes run perpendicular to z
    assert stripe.color_at_shape(point(0, 0, -0.5), Sphere()) == WHITE
    assert stripe.color_at_shape(point(0, 0, -1.5), Sphere()) == BLACK
