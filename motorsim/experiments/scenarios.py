from itertools import product

from ..config import SimConfig

# (kp, ki, kd)
PRESETS = {
    "default":    (0.5, 0.1, 0.02),
    "p_only":     (0.5, 0.0, 0.0),
    "aggressive": (2.0, 0.8, 0.01),
    "damped":     (0.3, 0.05, 0.08),
}

def preset_config(name, base=None):
    kp, ki, kd = PRESETS[name]
    return (base or SimConfig()).replace(kp=kp, ki=ki, kd=kd)

def gain_grid(kps, kis, kds):
    return [(float(kp), float(ki), float(kd)) for kp, ki, kd in product(kps, kis, kds)]
