import unittest
import numpy as np
import os
import sys

# Add project root for imports
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from irf_kinetics.config import QuadratureConfig
from irf_kinetics.convolution import convolve_curve, convolve_discrete, convolve_on_grid
from irf_kinetics.models import default_vector, rise2_fall1


class TestConvolveDiscrete(unittest.TestCase):
    def test_small_known_case(self):
        f = [1.0, 2.0, 3.0]
        g = [0.0, 1.0, 0.5]
        np.testing.assert_allclose(convolve_discrete(f, g), [0.0, 1.0, 2.5], atol=1e-12)
        np.testing.assert_allclose(convolve_discrete(f, g, origin=1), [1.0, 2.5, 4.0], atol=1e-12)
        np.testing.assert_allclose(convolve_discrete(f, g, dt=0.5, origin=1), [0.5, 1.25, 2.0], atol=1e-12)

    def test_matches_direct_convolution(self):
        rng = np.random.default_rng(3)
        f = rng.normal(size=50)
        g = rng.normal(size=21)
        expected = np.convolve(f, g)[10:60] * 0.2
        np.testing.assert_allclose(convolve_discrete(f, g, dt=0.2, origin=10), expected, atol=1e-10)

    def test_invalid_inputs(self):
        with self.assertRaises(ValueError):
            convolve_discrete(np.ones((2, 2)), np.ones(3))
        with self.assertRaises(ValueError):
            convolve_discrete([], [1.0])
        with self.assertRaises(ValueError):
            convolve_discrete([1.0], [1.0], dt=0.0)
        with self.assertRaises(ValueError):
            convolve_discrete([1.0, 2.0], [1.0, 2.0], origin=2)


class TestConvolveOnGrid(unittest.TestCase):
    def setUp(self):
        # fwhm, t0, i_r1, tau_r1, i_r2, tau_r2, i_f1, tau_f1, y0_f, amplitude
        self.params = [1.0, 0.0, 1.0, 0.4, 1.0, 2.0, 1.0, 6.0, 0.1, 0.5]

    def test_agrees_with_quadrature(self):
        times = -5.0 + 0.05 * np.arange(700)
        config = QuadratureConfig(step=0.05, causal_span=40.0)
        spectral = convolve_on_grid(self.params, times, model=rise2_fall1)
        quadrature = convolve_curve(self.params, times, model=rise2_fall1, config=config)
        np.testing.assert_allclose(spectral, quadrature, rtol=1e-6, atol=1e-9)

    def test_grid_starting_after_onset_matches_at_edges(self):
        times = 3.0 + 0.05 * np.arange(300)
        config = QuadratureConfig(step=0.05, causal_span=40.0)
        spectral = convolve_on_grid(self.params, times, model=rise2_fall1)
        quadrature = convolve_curve(self.params, times, model=rise2_fall1, config=config)
        self.assertGreater(quadrature[0], 0.1)
        np.testing.assert_allclose(spectral[[0, -1]], quadrature[[0, -1]], rtol=1e-6)
        np.testing.assert_allclose(spectral, quadrature, rtol=1e-6, atol=1e-9)

    def test_default_model_on_late_grid(self):
        params = default_vector("rise1_fall2")
        times = np.arange(200.0, 1000.0, 1.0)
        spectral = convolve_on_grid(params, times)
        quadrature = convolve_curve(params, times, config=QuadratureConfig(step=1.0))
        np.testing.assert_allclose(spectral, quadrature, rtol=1e-6, atol=1e-9)

    def test_zero_well_before_onset(self):
        times = np.linspace(-20, 10, 301)
        out = convolve_on_grid(self.params, times, model=rise2_fall1)
        self.assertTrue(np.all(np.isfinite(out)))
        np.testing.assert_allclose(out[times < -10], 0.0, atol=1e-10)

    def test_grid_validation(self):
        with self.assertRaises(ValueError):
            convolve_on_grid(self.params, [0.0], model=rise2_fall1)
        with self.assertRaises(ValueError):
            convolve_on_grid(self.params, [0.0, 0.1, 0.3], model=rise2_fall1)
        with self.assertRaises(ValueError):
            convolve_on_grid(self.params, [0.3, 0.2, 0.1], model=rise2_fall1)


if __name__ == '__main__':
    unittest.main()
