import logging

import numpy as np

from ..config import DEFAULT_CONFIG
from ..convolution import convolve_curve, convolve_on_grid
from ..exceptions import KineticsError
from ..models import get_model

logger = logging.getLogger(__name__)

BACKENDS = ("quadrature", "discrete")


class ForwardSimulator:
    """
    Class to simulate IRF-broadened signal timecourses from a kinetic model.

    Args:
        model (str or callable): Registry name (e.g. 'rise1_fall2') or a
                                 callable ``model(params, t)``.
        config (QuadratureConfig, optional): Quadrature settings.
        backend (str): 'quadrature' (fixed-step engine) or 'discrete'
                       (FFT convolution on the evaluation grid).
    """
    def __init__(self, model="rise1_fall2", config=None, backend="quadrature"):
        if backend not in BACKENDS:
            raise ValueError(f"backend must be one of {BACKENDS}; got {backend!r}")
        self.model = get_model(model) if isinstance(model, str) else model
        if not callable(self.model):
            raise TypeError("model must be a registry name or a callable model(params, t).")
        self.config = config or DEFAULT_CONFIG
        self.backend = backend

    def simulate(self, time, params):
        """
        Simulate the convolved signal at the given time points.
        Raises on invalid parameters.
        """
        if self.backend == "discrete":
            return convolve_on_grid(params, time, model=self.model)
        return convolve_curve(params, time, model=self.model, config=self.config)

    def evaluate(self, time, params):
        """
        Simulate for an external fitting routine.

        A parameter set that raises or produces non-finite values is
        rejected: the returned array is filled with inf.
        """
        time = np.atleast_1d(np.asarray(time, dtype=float))
        try:
            signal = self.simulate(time, params)
        except (KineticsError, ArithmeticError) as e:
            logger.debug("Rejected parameter set %r: %s", params, e)
            return np.full_like(time, np.inf)
        if not np.all(np.isfinite(signal)):
            logger.debug("Rejected parameter set %r: non-finite signal", params)
            return np.full_like(time, np.inf)
        return signal

    def residuals(self, time, data, params):
        data = np.asarray(data, dtype=float)
        signal = self.evaluate(time, params)
        if signal.shape != data.shape:
            raise ValueError(f"data shape {data.shape} does not match time shape {signal.shape}")
        return signal - data
