from .quadrature import IntegrationWindow, convolve, convolve_curve, integration_window
from .discrete import convolve_discrete, convolve_on_grid

__all__ = [
    'IntegrationWindow',
    'convolve',
    'convolve_curve',
    'integration_window',
    'convolve_discrete',
    'convolve_on_grid',
]
