import json
import math
import os
from dataclasses import dataclass, asdict, fields, replace as _dc_replace

CAUSAL = "causal"
FIXED_WINDOW = "fixed_window"
POLICIES = (CAUSAL, FIXED_WINDOW)


@dataclass(frozen=True)
class QuadratureConfig:
    """
    Settings for the fixed-step convolution engine.

    Attributes:
        window_start (float): Start of the fixed integration window.
        window_end (float): End (exclusive) of the fixed integration window.
        step (float): Quadrature step; accuracy scales with it.
        causal_span (float): Length of the causal-start window [t0, t0 + span).
        policy (str): 'causal' (sweep starts at t0) or 'fixed_window'
                      (fixed sweep, samples before t0 skipped).
    """
    window_start: float = -400.0
    window_end: float = 3600.0
    step: float = 2.0
    causal_span: float = 4000.0
    policy: str = CAUSAL

    def __post_init__(self):
        for name in ('window_start', 'window_end', 'step', 'causal_span'):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite; got {value}")
            object.__setattr__(self, name, value)
        if self.step <= 0:
            raise ValueError("step must be positive.")
        if self.window_end <= self.window_start:
            raise ValueError("window_end must be greater than window_start.")
        if self.causal_span <= 0:
            raise ValueError("causal_span must be positive.")
        if self.policy not in POLICIES:
            raise ValueError(f"policy must be one of {POLICIES}; got {self.policy!r}")

    @classmethod
    def from_dict(cls, data: dict) -> "QuadratureConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> dict:
        return asdict(self)

    def replace(self, **overrides) -> "QuadratureConfig":
        """Copy with the given fields changed; None values are ignored."""
        return _dc_replace(self, **{k: v for k, v in overrides.items() if v is not None})


DEFAULT_CONFIG = QuadratureConfig()


def load_config(filepath: str) -> QuadratureConfig:
    """Load a QuadratureConfig from a JSON object file."""
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Configuration file not found at: {filepath}")
    with open(filepath, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {filepath}: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {filepath} must contain a JSON object.")
    return QuadratureConfig.from_dict(data)


def save_config(config: QuadratureConfig, filepath: str):
    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
