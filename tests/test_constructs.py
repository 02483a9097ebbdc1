from unittest import TestCase

from shapely.geometry import Point, box

from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.lat_lng import LatLng
from tilecrs.constructs.transformation import Transformation, normalize_origin


class TestBounds(TestCase):
    def test_from_flat_sequence(self):
        b = Bounds.from_input((0, 1, 10, 21))

        self.assertEqual(b, Bounds(0, 1, 10, 21))
        self.assertEqual(b.width, 10)
        self.assertEqual(b.height, 20)
        self.assertEqual(b.extent, 20)

    def test_from_corner_points(self):
        b = Bounds.from_input([[180, 90], [-180, -90]])

        self.assertEqual(b, Bounds(-180, -90, 180, 90))

    def test_from_shapely_points_and_geometry(self):
        self.assertEqual(
            Bounds.from_input([Point(0, 0), Point(5, 5)]), Bounds(0, 0, 5, 5)
        )
        self.assertEqual(Bounds.from_input(box(1, 2, 3, 4)), Bounds(1, 2, 3, 4))

    def test_bounds_pass_through(self):
        b = Bounds(0, 0, 1, 1)

        self.assertIs(Bounds.from_input(b), b)

    def test_bad_input_raises(self):
        for bad in (5, [1, 2, 3], [1, 2], [[1, 2, 3], [4, 5, 6]]):
            with self.assertRaises(ValueError):
                Bounds.from_input(bad)


class TestTransformation(TestCase):
    def test_transform_and_untransform(self):
        t = Transformation(1, 180, -1, 90)

        pixel = t.transform(Point(0, 0), 2)
        self.assertEqual((pixel.x, pixel.y), (360, 180))

        back = t.untransform(pixel, 2)
        self.assertEqual((back.x, back.y), (0, 0))

    def test_default_flips_y(self):
        pixel = Transformation().transform(Point(3, 4))

        self.assertEqual((pixel.x, pixel.y), (3, -4))

    def test_from_origin(self):
        self.assertEqual(
            Transformation.from_origin([-180, 90]), Transformation(1, 180, -1, 90)
        )

    def test_normalize_origin(self):
        self.assertEqual(normalize_origin(Point(1, 2)), (1, 2))
        self.assertEqual(normalize_origin([1, 2]), (1, 2))
        with self.assertRaises(ValueError):
            normalize_origin([1])


class TestLatLng(TestCase):
    def test_lon_lat_order(self):
        p = LatLng.from_lon_lat(8.5, 47.4)

        self.assertEqual(p.lat, 47.4)
        self.assertEqual(p.lng, 8.5)
        self.assertFalse(p.unbounded)
        self.assertEqual(p.to_lon_lat(), (8.5, 47.4))
