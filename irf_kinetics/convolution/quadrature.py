"""
Fixed-step rectangular quadrature of the IRF-kinetics convolution.

    S(t) = integral f(y) g(t - y) dy,  y >= t0
        ~= sum_k g(t - y_k) f(y_k) * step,  y_k = start + k * step

Left-endpoint samples; the discretisation error scales with the step.
Two causality policies are supported:

    causal        the sweep starts at t0, so no pre-onset sample exists
    fixed_window  the sweep covers a fixed window and every sample with
                  y < t0 is skipped

Both give the same samples when the fixed window starts on the step grid
through t0, and agree to within the step otherwise.
"""
import logging
import math
from dataclasses import dataclass

import numpy as np

from ..config import CAUSAL, DEFAULT_CONFIG, FIXED_WINDOW, QuadratureConfig
from ..models import gaussian, rise1_fall2, width_and_onset

logger = logging.getLogger(__name__)

# rows of the (times x samples) kernel matrix evaluated at once in convolve_curve
_CURVE_BLOCK = 256


@dataclass(frozen=True)
class IntegrationWindow:
    start: float
    end: float
    step: float

    @property
    def num_samples(self) -> int:
        return max(int(math.ceil((self.end - self.start) / self.step - 1e-9)), 0)

    def samples(self) -> np.ndarray:
        """Left endpoints start + k * step covering [start, end)."""
        return self.start + self.step * np.arange(self.num_samples, dtype=float)


def integration_window(params, config: QuadratureConfig = None, policy: str = None) -> IntegrationWindow:
    """Derive the integration window for ``params`` under the given policy."""
    config = config or DEFAULT_CONFIG
    policy = policy or config.policy
    if policy == CAUSAL:
        _, t0 = width_and_onset(params)
        return IntegrationWindow(t0, t0 + config.causal_span, config.step)
    if policy == FIXED_WINDOW:
        return IntegrationWindow(config.window_start, config.window_end, config.step)
    raise ValueError(f"Unknown convolution policy: {policy!r}")


def _causal_samples(params, config, policy):
    policy = policy or config.policy
    window = integration_window(params, config, policy)
    ys = window.samples()
    if policy == FIXED_WINDOW:
        _, t0 = width_and_onset(params)
        ys = ys[ys >= t0]
    return ys, window.step


def convolve(params, t, model=rise1_fall2, config: QuadratureConfig = None, policy: str = None,
             vectorized: bool = True) -> float:
    """
    Convolve the Gaussian IRF with a causal kinetic model at a single time.

    Args:
        params: Parameter record or vector understood by ``model``.
        t (float): Evaluation time.
        model (callable): Kinetic model ``model(params, t)``.
        config (QuadratureConfig, optional): Window and step settings.
        policy (str, optional): 'causal' or 'fixed_window'; overrides config.policy.
        vectorized (bool): Evaluate the sweep with numpy (True) or with the
                           per-sample accumulation loop (False).
    Returns: float. Non-finite model values propagate into the result.
    """
    config = config or DEFAULT_CONFIG
    ys, step = _causal_samples(params, config, policy)
    if ys.size == 0:
        return 0.0
    t = float(t)

    if vectorized:
        f = np.asarray(model(params, ys), dtype=float)
        return float(np.sum(gaussian(params, t - ys) * f * step))

    total = 0.0
    for y in ys:
        total += gaussian(params, t - y) * model(params, float(y)) * step
    return float(total)


def convolve_curve(params, times, model=rise1_fall2, config: QuadratureConfig = None,
                   policy: str = None) -> np.ndarray:
    """
    Evaluate ``convolve`` over an array of times.

    The model is sampled once over the sweep and reused for every time.
    """
    config = config or DEFAULT_CONFIG
    times = np.atleast_1d(np.asarray(times, dtype=float))
    if times.ndim != 1:
        raise ValueError("times must be a 1D array.")
    ys, step = _causal_samples(params, config, policy)
    out = np.zeros(times.shape, dtype=float)
    if ys.size == 0 or times.size == 0:
        return out

    weights = np.asarray(model(params, ys), dtype=float) * step
    logger.debug("Convolving %d time points over %d quadrature samples (step=%g)",
                 times.size, ys.size, step)
    for start in range(0, times.size, _CURVE_BLOCK):
        block = times[start:start + _CURVE_BLOCK]
        kernel = gaussian(params, block[:, None] - ys[None, :])
        out[start:start + _CURVE_BLOCK] = kernel @ weights
    return out
