from .base_model import KineticParameters, heaviside_gated, width_and_onset
from .response import gaussian
from .rise_fall import (
    PARAMETER_METADATA,
    Rise1Fall1,
    Rise1Fall2,
    Rise2Fall1,
    rise1_fall1,
    rise1_fall2,
    rise2_fall1,
)

KINETIC_MODELS = {
    "rise1_fall1": rise1_fall1,
    "rise1_fall2": rise1_fall2,
    "rise2_fall1": rise2_fall1,
}

PARAMETER_CLASSES = {
    "rise1_fall1": Rise1Fall1,
    "rise1_fall2": Rise1Fall2,
    "rise2_fall1": Rise2Fall1,
}


def get_model(name):
    """Look up a kinetic model function by its registry name."""
    try:
        return KINETIC_MODELS[name]
    except KeyError:
        raise ValueError(f"Unknown kinetic model: {name!r}. Available: {', '.join(KINETIC_MODELS)}")


def default_vector(name):
    """Default parameter vector for a registered model, from PARAMETER_METADATA."""
    if name not in PARAMETER_METADATA:
        raise ValueError(f"Unknown kinetic model: {name!r}. Available: {', '.join(KINETIC_MODELS)}")
    return [default for _, default, _ in PARAMETER_METADATA[name]]


__all__ = [
    'KineticParameters',
    'Rise1Fall1',
    'Rise1Fall2',
    'Rise2Fall1',
    'rise1_fall1',
    'rise1_fall2',
    'rise2_fall1',
    'gaussian',
    'heaviside_gated',
    'width_and_onset',
    'PARAMETER_METADATA',
    'KINETIC_MODELS',
    'PARAMETER_CLASSES',
    'get_model',
    'default_vector',
]
