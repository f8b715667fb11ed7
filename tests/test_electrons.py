from __future__ import annotations

import math
import sys
import unittest
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from carbonsim.electrons import (
    CARBON_ELECTRONS,
    ElectronOrbit,
    ElectronOrbitAnimator,
    OrbitPlane,
    clear_path_cache,
    orbit_position,
    path_cache_info,
    path_polyline,
)


class OrbitPositionTests(unittest.TestCase):
    def test_motion_law_per_plane(self) -> None:
        t = 0.7
        angle = t * 1.4
        xz = orbit_position(ElectronOrbit(7.0, 1.4, OrbitPlane.XZ), t)
        xy = orbit_position(ElectronOrbit(7.0, 1.4, OrbitPlane.XY), t)
        neg = orbit_position(ElectronOrbit(7.0, 1.4, OrbitPlane.XY_NEGATED), t)
        np.testing.assert_allclose(xz, [7 * math.cos(angle), 0.0, 7 * math.sin(angle)])
        np.testing.assert_allclose(xy, [7 * math.cos(angle), 7 * math.sin(angle), 7 * math.sin(angle)])
        np.testing.assert_allclose(neg, [7 * math.cos(angle), -7 * math.sin(angle), 7 * math.sin(angle)])

    def test_motion_is_periodic(self) -> None:
        for orbit in CARBON_ELECTRONS:
            for t in (0.0, 0.33, 2.5, 17.0):
                np.testing.assert_allclose(
                    orbit_position(orbit, t), orbit_position(orbit, t + orbit.period), atol=1e-9
                )

    def test_negative_radius_starts_antipodal(self) -> None:
        for plane in OrbitPlane:
            positive = orbit_position(ElectronOrbit(3.0, 1.0, plane), 0.0)
            negative = orbit_position(ElectronOrbit(-3.0, 1.0, plane), 0.0)
            np.testing.assert_allclose(positive, -negative)

    def test_zero_radius_stays_at_center(self) -> None:
        np.testing.assert_allclose(orbit_position(ElectronOrbit(0.0, 1.0, OrbitPlane.XY), 3.0), [0, 0, 0])


class PathPolylineTests(unittest.TestCase):
    def setUp(self) -> None:
        clear_path_cache()

    def test_path_is_closed_with_101_points(self) -> None:
        for orbit in CARBON_ELECTRONS:
            path = path_polyline(orbit)
            self.assertEqual(path.shape, (101, 3))
            np.testing.assert_allclose(path[0], path[-1], atol=1e-9)

    def test_xz_path_lies_on_circle(self) -> None:
        path = path_polyline(ElectronOrbit(-5.0, 1.2, OrbitPlane.XZ))
        np.testing.assert_allclose(np.linalg.norm(path, axis=1), 5.0)
        np.testing.assert_allclose(path[:, 1], 0.0)

    def test_tilted_path_follows_plane_law(self) -> None:
        path = path_polyline(ElectronOrbit(3.0, 1.0, OrbitPlane.XY))
        np.testing.assert_allclose(np.hypot(path[:, 0], path[:, 2]), 3.0)
        np.testing.assert_allclose(path[:, 1], path[:, 2])
        negated = path_polyline(ElectronOrbit(3.0, 1.0, OrbitPlane.XY_NEGATED))
        np.testing.assert_allclose(negated[:, 1], -negated[:, 2])

    def test_path_is_cached_on_radius_and_plane(self) -> None:
        first = path_polyline(ElectronOrbit(7.0, 1.4, OrbitPlane.XZ, label="a"))
        second = path_polyline(ElectronOrbit(7.0, 2.0, OrbitPlane.XZ, color="#0F0", label="b"))
        self.assertIs(first, second)
        info = path_cache_info()
        self.assertEqual((info.hits, info.misses), (1, 1))
        path_polyline(ElectronOrbit(7.0, 1.4, OrbitPlane.XY))
        self.assertEqual(path_cache_info().misses, 2)

    def test_animator_does_not_resample_per_frame(self) -> None:
        animator = ElectronOrbitAnimator(CARBON_ELECTRONS[0])
        path = animator.path
        for t in np.linspace(0.0, 10.0, 600):
            animator.position(float(t))
        self.assertIs(animator.path, path)
        self.assertEqual(path_cache_info().misses, 1)
        np.testing.assert_allclose(animator.start_position, [3.0, 0.0, 0.0])


if __name__ == "__main__":
    unittest.main()
