
import numpy as np, pandas as pd
def metrics_from_log(log, dt, tol=0.02):
    """
    Step-response figures for one run. Time is cycle*dt.
    - rise_time: 10 -> 90 % of the target (NaN if never reached)
    - overshoot_pct: peak above target, % of |target| (0 if none)
    - settling_time: first time after which |actual-target| stays within tol*|target|
    - steady_state_error: |error| at the last cycle
    - control_effort: sum(|u|)*dt
    """
    df = pd.DataFrame(log)
    df['t'] = df['cycle'] * dt
    if df.empty:
        nan = float('nan')
        return {'rise_time':nan,'overshoot_pct':0.0,'settling_time':nan,
                'steady_state_error':nan,'control_effort':0.0}, df
    t = df['t'].to_numpy(); y = df['actual_speed'].to_numpy()
    target = float(df['target_speed'].iloc[0])

    rise = float('nan')
    if abs(target) > 1e-9:
        s = np.sign(target)
        i10 = np.flatnonzero(s*y >= 0.1*abs(target))
        i90 = np.flatnonzero(s*y >= 0.9*abs(target))
        if len(i10) and len(i90):
            rise = float(t[i90[0]] - t[i10[0]])

    overshoot = 0.0
    if abs(target) > 1e-9:
        overshoot = max(float((np.sign(target)*(y - target)).max()) / abs(target) * 100.0, 0.0)

    band = max(tol*abs(target), 1e-3)
    outside = np.flatnonzero(np.abs(y - target) > band)
    if len(outside) == 0:
        settle = float(t[0])
    elif outside[-1] < len(y) - 1:
        settle = float(t[outside[-1] + 1])
    else:
        settle = float('nan')

    sse = float(abs(df['error'].iloc[-1]))
    effort = float(np.sum(np.abs(df['control_signal'])) * dt)
    return {'rise_time':rise,'overshoot_pct':overshoot,'settling_time':settle,
            'steady_state_error':sse,'control_effort':effort}, df
