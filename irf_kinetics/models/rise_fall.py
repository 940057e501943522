"""
Closed-form rise/fall kinetics gated at the onset time t0.

Each model is the product of a rising part, which starts at zero at t0,
and a falling part made of an offset plus decaying exponentials, scaled by
a global amplitude. Time constants are used as absolute values; amplitudes
and offsets keep their sign.

The functions do not zero the signal before t0. For t well before onset
the exponentials grow without bound and may overflow to +/-inf; causal
truncation is left to the convolution engine (or ``heaviside_gated``).
"""
from dataclasses import dataclass

import numpy as np

from .base_model import KineticParameters, as_output

# --- Parameter metadata ---
PARAMETER_METADATA = {
    "rise1_fall1": [
        # Parameter name, Default value, Description
        ('fwhm', 100.0, "IRF full width at half maximum"),
        ('t0', 0.0, "Onset time of the kinetics"),
        ('tau_r1', 50.0, "Rise time constant"),
        ('i_f1', 1.0, "Amplitude of the decay component"),
        ('tau_f1', 1000.0, "Decay time constant"),
        ('y0_f', 0.2, "Long-lived offset after decay"),
        ('amplitude', 1.0, "Global amplitude"),
    ],
    "rise1_fall2": [
        ('fwhm', 100.0, "IRF full width at half maximum"),
        ('t0', 0.0, "Onset time of the kinetics"),
        ('tau_r1', 50.0, "Rise time constant"),
        ('i_f1', 0.6, "Amplitude of the fast decay component"),
        ('tau_f1', 300.0, "Fast decay time constant"),
        ('i_f2', 0.4, "Amplitude of the slow decay component"),
        ('tau_f2', 2000.0, "Slow decay time constant"),
        ('y0_f', 0.0, "Long-lived offset after decay"),
        ('amplitude', 1.0, "Global amplitude"),
    ],
    "rise2_fall1": [
        ('fwhm', 100.0, "IRF full width at half maximum"),
        ('t0', 0.0, "Onset time of the kinetics"),
        ('i_r1', 0.5, "Amplitude of the first rise component"),
        ('tau_r1', 30.0, "First rise time constant"),
        ('i_r2', 0.5, "Amplitude of the second rise component"),
        ('tau_r2', 400.0, "Second rise time constant"),
        ('i_f1', 1.0, "Amplitude of the decay component"),
        ('tau_f1', 1500.0, "Decay time constant"),
        ('y0_f', 0.0, "Long-lived offset after decay"),
        ('amplitude', 1.0, "Global amplitude"),
    ],
}


@dataclass(frozen=True)
class Rise1Fall1(KineticParameters):
    """Single unit rise, single exponential decay over an offset."""
    tau_r1: float
    i_f1: float
    tau_f1: float
    y0_f: float
    amplitude: float

    TIME_CONSTANTS = ('tau_r1', 'tau_f1')

    def evaluate(self, t):
        return rise1_fall1(self, t)


@dataclass(frozen=True)
class Rise1Fall2(KineticParameters):
    """Single unit rise, bi-exponential decay over an offset."""
    tau_r1: float
    i_f1: float
    tau_f1: float
    i_f2: float
    tau_f2: float
    y0_f: float
    amplitude: float

    TIME_CONSTANTS = ('tau_r1', 'tau_f1', 'tau_f2')

    def evaluate(self, t):
        return rise1_fall2(self, t)


@dataclass(frozen=True)
class Rise2Fall1(KineticParameters):
    """Two weighted rise components, single exponential decay over an offset."""
    i_r1: float
    tau_r1: float
    i_r2: float
    tau_r2: float
    i_f1: float
    tau_f1: float
    y0_f: float
    amplitude: float

    TIME_CONSTANTS = ('tau_r1', 'tau_r2', 'tau_f1')

    def evaluate(self, t):
        return rise2_fall1(self, t)


def _decay(amp, tau, t_shift):
    return amp * np.exp(-t_shift / abs(tau))


def _rise(tau, t_shift, amp=1.0):
    return 1.0 - amp * np.exp(-t_shift / abs(tau))


def rise1_fall1(params, t):
    """A * (1 - exp(-t'/tau_r1)) * (y0_f + I_f1 * exp(-t'/tau_f1)), t' = t - t0."""
    p = Rise1Fall1.coerce(params)
    ts = np.asarray(t, dtype=float) - p.t0
    value = p.amplitude * _rise(p.tau_r1, ts) * (p.y0_f + _decay(p.i_f1, p.tau_f1, ts))
    return as_output(value, t)


def rise1_fall2(params, t):
    """A * (1 - exp(-t'/tau_r1)) * (y0_f + I_f1 * exp(-t'/tau_f1) + I_f2 * exp(-t'/tau_f2))."""
    p = Rise1Fall2.coerce(params)
    ts = np.asarray(t, dtype=float) - p.t0
    fall = p.y0_f + _decay(p.i_f1, p.tau_f1, ts) + _decay(p.i_f2, p.tau_f2, ts)
    value = p.amplitude * _rise(p.tau_r1, ts) * fall
    return as_output(value, t)


def rise2_fall1(params, t):
    """A * [(1 - I_r1 * exp(-t'/tau_r1)) + (1 - I_r2 * exp(-t'/tau_r2))] * (y0_f + I_f1 * exp(-t'/tau_f1))."""
    p = Rise2Fall1.coerce(params)
    ts = np.asarray(t, dtype=float) - p.t0
    rise = _rise(p.tau_r1, ts, p.i_r1) + _rise(p.tau_r2, ts, p.i_r2)
    value = p.amplitude * rise * (p.y0_f + _decay(p.i_f1, p.tau_f1, ts))
    return as_output(value, t)
