class KineticsError(Exception):
    """Base class for errors raised by irf_kinetics."""


class InvalidParameterVector(KineticsError, ValueError):
    """
    Raised when a parameter vector does not match the layout of the selected
    kinetic model (wrong length, wrong record type, empty vector).
    """


class ParameterDomainError(KineticsError, ArithmeticError):
    """
    Raised for parameters outside the arithmetic domain of the model:
    zero FWHM, zero time constants or non-finite values.
    """
