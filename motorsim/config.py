from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace as _replace
from pathlib import Path


# -----------------------------
# Run configuration
# -----------------------------
@dataclass(frozen=True)
class SimConfig:
    """
    Everything one closed-loop run needs, fixed for the whole run.
    Defaults are the stock 200-cycle speed-control demo.
    """

    # Setpoint (RPM)
    target_speed: float = 100.0

    # PID gains
    kp: float = 0.5
    ki: float = 0.1
    kd: float = 0.02

    # Time step (s) and horizon (cycles)
    dt: float = 0.05
    cycles: int = 200

    # Motor
    inertia: float = 0.1
    friction: float = 0.05

    # CSV destination
    log_path: str = "log.csv"

    def __post_init__(self):
        # JSON and CLI input may carry "0.05" or 20.0; normalise before checking
        for name in ("target_speed", "kp", "ki", "kd", "dt", "inertia", "friction"):
            v = getattr(self, name)
            try:
                object.__setattr__(self, name, float(v))
            except (TypeError, ValueError):
                raise ValueError(f"{name} must be a number, got {v!r}") from None
        object.__setattr__(self, "cycles", _whole(self.cycles))
        self.validate()

    def validate(self) -> None:
        if not self.dt > 0:
            raise ValueError(f"dt must be > 0, got {self.dt}")
        if self.inertia == 0:
            raise ValueError("inertia must be non-zero")
        if self.friction < 0:
            raise ValueError(f"friction must be >= 0, got {self.friction}")
        if self.cycles < 0:
            raise ValueError(f"cycles must be >= 0, got {self.cycles}")

    @property
    def gains(self) -> tuple:
        return (self.kp, self.ki, self.kd)

    def replace(self, **overrides) -> "SimConfig":
        return _replace(self, **overrides)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "SimConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known})


def _whole(v) -> int:
    if isinstance(v, bool):
        raise ValueError(f"cycles must be a whole number, got {v!r}")
    try:
        f = float(v)
    except (TypeError, ValueError):
        raise ValueError(f"cycles must be a whole number, got {v!r}") from None
    if not f.is_integer():
        raise ValueError(f"cycles must be a whole number, got {v!r}")
    return int(f)


def load_config(path) -> SimConfig:
    """Read a JSON object of SimConfig fields; missing fields keep their defaults."""
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return SimConfig.from_dict(data)
