
class MotorModel:
    """
    First-order motor, forward Euler:
      speed += (u / inertia) * dt
      speed -= friction * speed * dt     (sign-opposing, evaluated on the new speed)
    Friction is not clamped against |speed|; a large friction*dt can flip the sign.
    """
    def __init__(self, inertia=0.1, friction=0.05):
        if inertia == 0:
            raise ValueError("motor inertia must be non-zero")
        self.inertia=inertia; self.friction=friction; self.speed=0.0
    @classmethod
    def from_config(cls, cfg):
        return cls(cfg.inertia, cfg.friction)
    def reset(self, speed=0.0):
        self.speed = speed
    def update(self, u, dt):
        self.speed += (u / self.inertia) * dt
        if self.speed > 0:
            self.speed -= self.friction * self.speed * dt
        elif self.speed < 0:
            self.speed += self.friction * -self.speed * dt
        return self.speed
