import numpy as np

from ..exceptions import InvalidParameterVector, ParameterDomainError
from .base_model import KineticParameters, as_output

# 4 * ln(2): exp(-C * (t / FWHM)**2) falls to 1/2 at t = FWHM / 2
GAUSS_FWHM_COEFF = 2.773


def gaussian(params, t):
    """
    Instrument response function: a Gaussian with unit peak at t = 0.

        g(t) = exp(-2.773 * (t / |FWHM|)**2)

    Args:
        params: Parameter record or vector; only the FWHM (index 0) is used.
        t (float or np.ndarray): Time offset(s) from the response centre.
    Returns: float for scalar ``t``, otherwise np.ndarray.
    Raises: ParameterDomainError if FWHM is zero,
            InvalidParameterVector if the vector is empty.
    """
    if isinstance(params, KineticParameters):
        fwhm = params.fwhm
    else:
        try:
            fwhm = float(params[0])
        except (IndexError, TypeError, KeyError):
            raise InvalidParameterVector("Parameter vector must start with the IRF FWHM.")
    fwhm = abs(fwhm)
    if fwhm == 0:
        raise ParameterDomainError("IRF FWHM must be non-zero.")

    x = np.asarray(t, dtype=float) / fwhm
    return as_output(np.exp(-GAUSS_FWHM_COEFF * x * x), t)
