from typing import Callable, Iterable, Iterator, Optional

from ..config import SimConfig
from ..control.pid import PID
from ..dynamics.motor import MotorModel
from .pacing import no_delay
from .recorders import HEADER, CycleRecord, Recorder

COLUMNS = HEADER.split(",")


def simulate(cfg: SimConfig, pacer: Optional[Callable[[float], None]] = None) -> Iterator[CycleRecord]:
    """
    Fixed-step closed loop, exactly cfg.cycles iterations.
    The controller acts on the speed from the previous cycle; the yielded
    error is taken against the speed after this cycle's motor update.
    """
    pacer = pacer or no_delay
    pid = PID.from_config(cfg)
    motor = MotorModel.from_config(cfg)
    target, dt = cfg.target_speed, cfg.dt
    for i in range(cfg.cycles):
        measured = motor.speed
        u = pid.update(target, measured)
        motor.update(u, dt)
        yield CycleRecord(i, target, motor.speed, target - motor.speed, u)
        pacer(dt)


def run(cfg: Optional[SimConfig] = None, recorders: Iterable[Recorder] = (),
        pacer: Optional[Callable[[float], None]] = None) -> dict:
    cfg = cfg or SimConfig()
    recorders = list(recorders)
    log = {k: [] for k in COLUMNS}
    for rec in simulate(cfg, pacer=pacer):
        for r in recorders:
            r.record(*rec)
        for k, v in zip(COLUMNS, rec):
            log[k].append(v)
    return log
