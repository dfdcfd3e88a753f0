
class PID:
    """
    Discrete PID with rectangular integration and a backward-difference derivative.
    The integral is never clamped (no anti-windup), so sustained error winds it up.
    """
    def __init__(self, kp=0.0, ki=0.0, kd=0.0, dt=1.0):
        if not dt > 0:
            raise ValueError(f"PID time step must be > 0, got {dt}")
        self.kp=kp; self.ki=ki; self.kd=kd; self.dt=dt
        self.integral=0.0; self.prev_error=0.0
    @classmethod
    def from_config(cls, cfg):
        return cls(cfg.kp, cfg.ki, cfg.kd, cfg.dt)
    def reset(self):
        self.integral=0.0; self.prev_error=0.0
    def update(self, setpoint, measured):
        e = setpoint - measured
        p = self.kp*e
        self.integral += e*self.dt
        # prev_error starts at 0: the error before the run is taken as zero
        d = (e - self.prev_error) / self.dt
        self.prev_error = e
        return p + self.ki*self.integral + self.kd*d
