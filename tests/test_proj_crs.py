import math
from unittest import TestCase
from unittest.mock import Mock

from shapely.geometry import Point

from tilecrs.constructs.bounds import Bounds
from tilecrs.constructs.lat_lng import LatLng
from tilecrs.constructs.transformation import Transformation
from tilecrs.crs.options import CRSOptions
from tilecrs.crs.proj_crs import ProjCRS
from tilecrs.crs.scale_table import ScaleTable
from tilecrs.projection.projection import ProjectionCode, ReadyProjection
from tilecrs.projection.registry import DefinitionRegistry
from tilecrs.utils.constants import DEVICE_SCALE_FACTOR
from tilecrs.utils.exceptions import ProjectionNotFoundError

WORLD_BOUNDS = [[-180, -90], [180, 90]]


class TestProjCRSConstruction(TestCase):
    def setUp(self):
        self.registry = DefinitionRegistry()

    def build(self, **options) -> ProjCRS:
        return ProjCRS.from_code("EPSG:4326", registry=self.registry, **options)

    def test_scales_scenario(self):
        crs = self.build(scales=[1, 2, 4])

        self.assertAlmostEqual(crs.scale(0), 3779.5275590551, places=6)
        self.assertAlmostEqual(crs.scale(1), 7559.0551181102, places=6)
        self.assertAlmostEqual(crs.scale(2), 15118.1102362205, places=6)
        self.assertAlmostEqual(crs.scale(0.5), 5669.2913385827, places=6)
        self.assertEqual(crs.zoom(crs.scale(0)), 0)
        self.assertTrue(1 < crs.zoom(10000) < 2)

    def test_scales_take_priority(self):
        crs = self.build(
            scales=[1, 2],
            scale_denominators=[10, 5],
            resolutions=[4, 2],
            bounds=WORLD_BOUNDS,
        )

        self.assertEqual(crs.scales, ScaleTable.from_scales([1, 2]))

    def test_denominators_beat_resolutions(self):
        crs = self.build(scale_denominators=[10, 5], resolutions=[4, 2])

        self.assertEqual(crs.scales, ScaleTable.from_scale_denominators([10, 5]))

    def test_resolutions_beat_bounds(self):
        crs = self.build(resolutions=[4, 2], bounds=WORLD_BOUNDS)

        self.assertEqual(crs.scales.values, (0.25, 0.5))

    def test_empty_scales_still_take_priority(self):
        crs = self.build(scales=[], resolutions=[4, 2])

        self.assertEqual(len(crs.scales), 0)

    def test_bounds_synthesize_scales(self):
        crs = self.build(bounds=[0, 0, 2560, 2560])

        self.assertEqual(len(crs.scales), 23)
        self.assertEqual(crs.scale(0), 0.1)
        self.assertEqual(crs.scale(1), 0.2)
        self.assertEqual(crs.scale(22), 2**22 / 10)

    def test_infinite_only_depends_on_bounds(self):
        self.assertFalse(self.build(bounds=[0, 0, 2560, 2560]).infinite)
        self.assertFalse(self.build(scales=[1, 2], bounds=WORLD_BOUNDS).infinite)
        self.assertTrue(self.build(scales=[1, 2]).infinite)
        self.assertTrue(self.build(resolutions=[4, 2]).infinite)

    def test_no_configuration_gives_empty_infinite_crs(self):
        crs = self.build()

        self.assertEqual(len(crs.scales), 0)
        self.assertTrue(crs.infinite)
        self.assertEqual(crs.zoom(100), math.inf)

    def test_denominator_matches_resolution_times_dpi(self):
        by_denominator = self.build(scale_denominators=[1000])
        by_resolution = self.build(resolutions=[1000])

        self.assertAlmostEqual(
            by_denominator.scale(0) / by_resolution.scale(0), DEVICE_SCALE_FACTOR
        )

    def test_default_transformation(self):
        crs = self.build()

        self.assertEqual(crs.transformation, Transformation(1, 0, -1, 0))

    def test_origin_sets_transformation(self):
        crs = self.build(origin=[-180, 90])

        self.assertEqual(crs.transformation, Transformation(1, 180, -1, 90))

    def test_origin_point_is_normalized(self):
        crs = self.build(origin=Point(-180, 90))

        self.assertEqual(crs.transformation, Transformation(1, 180, -1, 90))

    def test_origin_overrides_transformation(self):
        crs = self.build(origin=[0, 0], transformation=Transformation(2, 0, 2, 0))

        self.assertEqual(crs.transformation, Transformation(1, 0, -1, 0))

    def test_custom_transformation(self):
        crs = self.build(transformation=Transformation(2, 1, -2, 1))

        self.assertEqual(crs.transformation, Transformation(2, 1, -2, 1))

    def test_bad_origin_raises(self):
        with self.assertRaises(ValueError):
            self.build(origin=[1, 2, 3])

    def test_unknown_code_raises(self):
        with self.assertRaises(ProjectionNotFoundError):
            ProjCRS.from_code("EPSG:bogus", registry=self.registry)

    def test_definition_goes_to_injected_registry(self):
        ProjCRS.from_code(
            "MY:MERC",
            "+proj=merc +a=6378137 +b=6378137 +units=m +no_defs",
            registry=self.registry,
        )

        self.assertIsNotNone(self.registry.definition("MY:MERC"))

    def test_constructor_with_options(self):
        options = CRSOptions(scale_denominators=[2000, 1000], bounds=WORLD_BOUNDS)

        crs = ProjCRS(ProjectionCode("EPSG:4326"), options, self.registry)

        self.assertEqual(crs.code, "EPSG:4326")
        self.assertEqual(crs.bounds, Bounds(-180, -90, 180, 90))
        self.assertIs(crs.options, options)

    def test_ready_projection(self):
        capability = Mock()
        capability.forward.return_value = (3.0, 4.0)

        crs = ProjCRS.from_projection(capability, code="CUSTOM:1", scales=[1])

        self.assertEqual(crs.code, "CUSTOM:1")
        self.assertIs(crs.projection.capability, capability)
        self.assertEqual(crs.project(LatLng(0, 0)), Point(3, 4))

    def test_ready_projection_through_constructor(self):
        capability = Mock()

        crs = ProjCRS(ReadyProjection(capability), CRSOptions(bounds=WORLD_BOUNDS))

        self.assertIsNone(crs.code)
        self.assertFalse(crs.infinite)


class TestProjCRSPixels(TestCase):
    def setUp(self):
        self.crs = ProjCRS.from_code(
            "EPSG:4326",
            registry=DefinitionRegistry(),
            origin=[-180, 90],
            bounds=WORLD_BOUNDS,
        )

    def test_origin_maps_to_pixel_zero(self):
        point = self.crs.lat_lng_to_point(LatLng(90, -180), 3)

        self.assertAlmostEqual(point.x, 0)
        self.assertAlmostEqual(point.y, 0)

    def test_lat_lng_to_point(self):
        scale = self.crs.scale(2)

        point = self.crs.lat_lng_to_point(LatLng(0, 0), 2)

        self.assertAlmostEqual(point.x, 180 * scale)
        self.assertAlmostEqual(point.y, 90 * scale)

    def test_point_to_lat_lng_round_trip(self):
        lat_lng = LatLng(47.3769, 8.5417)

        point = self.crs.lat_lng_to_point(lat_lng, 5.5)
        back = self.crs.point_to_lat_lng(point, 5.5)

        self.assertAlmostEqual(back.lat, lat_lng.lat)
        self.assertAlmostEqual(back.lng, lat_lng.lng)

    def test_projected_bounds(self):
        """The world fits one 256 pixel tile at zoom 0"""
        bounds = self.crs.projected_bounds(0)

        self.assertAlmostEqual(bounds.min_x, 0)
        self.assertAlmostEqual(bounds.min_y, 0)
        self.assertAlmostEqual(bounds.max_x, 256)
        self.assertAlmostEqual(bounds.max_y, 128)

    def test_projected_bounds_of_infinite_crs(self):
        crs = ProjCRS.from_code("EPSG:4326", registry=DefinitionRegistry(), scales=[1])

        self.assertIsNone(crs.projected_bounds(0))

    def test_unproject_keeps_unbounded_flag(self):
        lat_lng = self.crs.unproject(Point(8.5, 47.5), unbounded=True)

        self.assertAlmostEqual(lat_lng.lat, 47.5)
        self.assertAlmostEqual(lat_lng.lng, 8.5)
        self.assertTrue(lat_lng.unbounded)

    def test_distance(self):
        one_degree = self.crs.R * math.pi / 180

        d = self.crs.distance(LatLng(0, 0), LatLng(0, 1))

        self.assertAlmostEqual(d, one_degree, delta=0.01)
        self.assertEqual(self.crs.distance(LatLng(10, 10), LatLng(10, 10)), 0)
