from __future__ import annotations

import sys
import unittest
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from carbonsim.orbitals import (
    CARBON_ORBITALS,
    OrbitalKind,
    configuration_text,
    describe_orbital,
    electron_configuration,
)


class OrbitalShapeTests(unittest.TestCase):
    def test_s_orbital_is_uniform(self) -> None:
        shape = describe_orbital(OrbitalKind.S)
        np.testing.assert_array_equal(shape.scale, [1.0, 1.0, 1.0])
        np.testing.assert_array_equal(shape.label_offset, [0.0, 0.0, 0.0])

    def test_p_orbital_stretches_along_orientation(self) -> None:
        for index, axis in enumerate("xyz"):
            scale = describe_orbital(OrbitalKind.P, axis).scale
            self.assertEqual(int(np.argmax(scale)), index)
            self.assertEqual(sorted(scale.tolist()), [0.4, 0.4, 1.2])

    def test_p_label_offsets(self) -> None:
        np.testing.assert_array_equal(describe_orbital("p", "x").label_offset, [2, 2, 2])
        np.testing.assert_array_equal(describe_orbital("p", "y").label_offset, [0, 4, 0])
        np.testing.assert_array_equal(describe_orbital("p", "z").label_offset, [0, 0, 4])

    def test_p_orientation_defaults_to_x(self) -> None:
        shape = describe_orbital(OrbitalKind.P)
        np.testing.assert_array_equal(shape.scale, [1.2, 0.4, 0.4])

    def test_carbon_orbital_table(self) -> None:
        self.assertEqual([o.label for o in CARBON_ORBITALS], ["1s", "2s", "2px", "2py"])
        self.assertEqual(CARBON_ORBITALS[3].shape().scale.tolist(), [0.4, 1.2, 0.4])


class ElectronConfigurationTests(unittest.TestCase):
    def test_carbon(self) -> None:
        self.assertEqual(electron_configuration(6), [(1, 0, 2), (2, 0, 2), (2, 1, 2)])
        self.assertEqual(configuration_text(6), "1s² 2s² 2p²")

    def test_neon_fills_p_shell(self) -> None:
        self.assertEqual(configuration_text(10), "1s² 2s² 2p⁶")


if __name__ == "__main__":
    unittest.main()
