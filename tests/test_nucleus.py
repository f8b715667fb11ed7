from __future__ import annotations

import sys
import unittest
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from carbonsim.nucleus import (
    NUCLEUS_RADIUS,
    NucleonKind,
    generate_nucleons,
    isotope_label,
    neutron_count,
    spherical_to_cartesian,
)


class NucleonLayoutTests(unittest.TestCase):
    def test_counts_and_kinds_per_isotope(self) -> None:
        for isotope in (12, 13, 14):
            nucleons = generate_nucleons(isotope)
            self.assertEqual(len(nucleons), isotope)
            kinds = [n.kind for n in nucleons]
            self.assertEqual(kinds[:6], [NucleonKind.PROTON] * 6)
            self.assertEqual(kinds[6:], [NucleonKind.NEUTRON] * (isotope - 6))

    def test_nucleons_lie_on_sphere(self) -> None:
        for isotope in (12, 13, 14):
            positions = np.array([n.position for n in generate_nucleons(isotope)])
            np.testing.assert_allclose(np.linalg.norm(positions, axis=1), NUCLEUS_RADIUS)

    def test_unknown_isotope_falls_back_to_carbon_12(self) -> None:
        fallback = generate_nucleons(99)
        reference = generate_nucleons(12)
        self.assertEqual(neutron_count(99), 6)
        self.assertEqual([n.kind for n in fallback], [n.kind for n in reference])
        for a, b in zip(fallback, reference):
            np.testing.assert_allclose(a.position, b.position)

    def test_layout_is_deterministic_and_distinct(self) -> None:
        first = np.array([n.position for n in generate_nucleons(14)])
        second = np.array([n.position for n in generate_nucleons(14)])
        np.testing.assert_array_equal(first, second)
        gaps = np.linalg.norm(first[:, None, :] - first[None, :, :], axis=-1)
        np.fill_diagonal(gaps, np.inf)
        self.assertGreater(gaps.min(), 0.1)

    def test_first_nucleon_matches_polar_formula(self) -> None:
        total = 13
        polar = np.arccos(1 - 2 * 0.5 / total)
        expected = spherical_to_cartesian(NUCLEUS_RADIUS, polar, np.sqrt(total * np.pi) * polar)
        np.testing.assert_allclose(generate_nucleons(13)[0].position, expected)

    def test_positions_are_read_only(self) -> None:
        nucleon = generate_nucleons(12)[0]
        with self.assertRaises(ValueError):
            nucleon.position[0] = 5.0

    def test_colors_and_labels(self) -> None:
        nucleons = generate_nucleons(12)
        self.assertEqual(nucleons[0].color, "#FFD700")
        self.assertEqual(nucleons[-1].color, "#C0C0C0")
        self.assertEqual(isotope_label(14), "Carbon-14")


if __name__ == "__main__":
    unittest.main()
