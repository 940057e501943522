"""Gaussian-IRF convolution of causal rise/fall kinetics."""
from .config import DEFAULT_CONFIG, QuadratureConfig, load_config
from .convolution import convolve, convolve_curve, convolve_discrete, convolve_on_grid
from .exceptions import InvalidParameterVector, KineticsError, ParameterDomainError
from .models import (
    KINETIC_MODELS,
    Rise1Fall1,
    Rise1Fall2,
    Rise2Fall1,
    gaussian,
    get_model,
    rise1_fall1,
    rise1_fall2,
    rise2_fall1,
)
from .simulators import ForwardSimulator

__version__ = '0.1.0'
