import math
from dataclasses import dataclass, fields
from typing import ClassVar, Dict, Tuple

import numpy as np

from ..exceptions import InvalidParameterVector, ParameterDomainError


@dataclass(frozen=True)
class KineticParameters:
    """
    Abstract base record for kinetic model parameters.

    Every record starts with the instrument response width and the onset
    time, in that order, so that ``record.to_vector()`` reproduces the
    positional parameter vector layout:

        index 0: fwhm  (IRF full width at half maximum, sign ignored)
        index 1: t0    (Heaviside onset time)
        index 2..: model-specific fields, in declaration order

    Subclasses list the names of their time-constant fields in
    ``TIME_CONSTANTS``; those must be non-zero because they divide t'.
    """
    fwhm: float
    t0: float

    TIME_CONSTANTS: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise InvalidParameterVector(
                    f"{type(self).__name__}.{f.name} must be a real number; got {value!r}"
                )
            if not math.isfinite(value):
                raise ParameterDomainError(f"{type(self).__name__}.{f.name} must be finite; got {value}")
            object.__setattr__(self, f.name, value)

        if self.fwhm == 0:
            raise ParameterDomainError(f"{type(self).__name__}.fwhm must be non-zero.")
        for name in self.TIME_CONSTANTS:
            if getattr(self, name) == 0:
                raise ParameterDomainError(f"{type(self).__name__}.{name} must be non-zero.")

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_vector(cls, vector):
        """Build a record from a positional parameter vector."""
        try:
            values = np.asarray(vector, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidParameterVector(f"{cls.__name__} parameter vector must be numeric: {e}")
        names = cls.field_names()
        if values.ndim != 1 or values.size != len(names):
            raise InvalidParameterVector(
                f"{cls.__name__} expects {len(names)} values ({', '.join(names)}); "
                f"got shape {values.shape}"
            )
        return cls(*values.tolist())

    @classmethod
    def coerce(cls, params):
        """Return ``params`` as an instance of this record type."""
        if isinstance(params, cls):
            return params
        if isinstance(params, KineticParameters):
            raise InvalidParameterVector(
                f"Expected {cls.__name__} parameters; got {type(params).__name__}"
            )
        return cls.from_vector(params)

    def to_vector(self) -> np.ndarray:
        return np.array([getattr(self, name) for name in self.field_names()], dtype=float)

    def describe(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self.field_names()}

    def evaluate(self, t):
        raise NotImplementedError


def width_and_onset(params) -> Tuple[float, float]:
    """
    Return ``(|fwhm|, t0)`` from a record or a raw parameter vector.
    Only the two leading fields are read.
    """
    if isinstance(params, KineticParameters):
        return abs(params.fwhm), params.t0
    try:
        return abs(float(params[0])), float(params[1])
    except (IndexError, TypeError, KeyError):
        raise InvalidParameterVector("Parameter vector must start with (fwhm, t0).")


def as_output(values, t):
    """Scalar time in, float out; array time in, array out."""
    if np.ndim(t) == 0:
        return float(np.asarray(values).reshape(()))
    return np.asarray(values, dtype=float)


def heaviside_gated(model):
    """
    Wrap a kinetic model so it is exactly zero before the onset time.

    The wrapped model is only evaluated at t >= t0, so the large positive
    exponents that appear for t well before onset are never computed.
    """
    def gated(params, t):
        _, t0 = width_and_onset(params)
        t_arr = np.atleast_1d(np.asarray(t, dtype=float))
        out = np.zeros(t_arr.shape, dtype=float)
        on = t_arr >= t0
        if np.any(on):
            out[on] = model(params, t_arr[on])
        return as_output(out, t)

    gated.__name__ = f"gated_{getattr(model, '__name__', 'model')}"
    gated.__wrapped__ = model
    return gated
