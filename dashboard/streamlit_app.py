# dashboard/streamlit_app.py
import os
import sys
import time

import pandas as pd
import plotly.express as px
import streamlit as st

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from motorsim.config import SimConfig
from motorsim.analysis.metrics import metrics_from_log
from motorsim.experiments.recorders import HEADER
from motorsim.experiments.sim import run

DEFAULTS = SimConfig()

# ---------- Helpers ----------
def to_log_csv(df: pd.DataFrame) -> str:
    lines = [HEADER]
    for r in df.itertuples(index=False):
        lines.append(f"{int(r.cycle):d},{r.target_speed:.4f},{r.actual_speed:.4f},"
                     f"{r.error:.4f},{r.control_signal:.4f}")
    return "\n".join(lines) + "\n"

def kpi(metrics, key, label, fmt="{:,.3f}"):
    v = metrics.get(key)
    if v is None or pd.isna(v):
        st.metric(label, "–")
    else:
        st.metric(label, fmt.format(v))

# ---------- UI ----------
st.set_page_config(page_title="Motor PID — Run Dashboard", layout="wide")
st.title("Motor Speed PID — Run Dashboard")

with st.sidebar:
    st.header("Data source")
    source = st.radio("Source", ["Simulate", "Load log.csv"], horizontal=True)
    st.markdown("---")
    st.header("Setpoint & PID")
    target = st.number_input("Target speed (RPM)", value=DEFAULTS.target_speed, step=10.0)
    kp = st.number_input("Kp", value=DEFAULTS.kp, step=0.05, format="%.3f")
    ki = st.number_input("Ki", value=DEFAULTS.ki, step=0.05, format="%.3f")
    kd = st.number_input("Kd", value=DEFAULTS.kd, step=0.005, format="%.3f")
    st.header("Motor & horizon")
    inertia = st.number_input("Inertia", value=DEFAULTS.inertia, step=0.01, format="%.3f")
    friction = st.number_input("Friction", value=DEFAULTS.friction, min_value=0.0, step=0.01, format="%.3f")
    dt = st.number_input("dt (s)", value=DEFAULTS.dt, min_value=0.001, step=0.01, format="%.3f")
    cycles = st.number_input("Cycles", value=DEFAULTS.cycles, min_value=1, step=50)

status = st.empty()

if source == "Simulate":
    try:
        cfg = SimConfig(target_speed=target, kp=kp, ki=ki, kd=kd, dt=dt,
                        cycles=int(cycles), inertia=inertia, friction=friction)
    except ValueError as e:
        st.error(f"Invalid configuration: {e}")
        st.stop()
    metrics, df = metrics_from_log(run(cfg), cfg.dt)
    status.success(f"Simulated {len(df):,} cycles")
else:
    up = st.file_uploader("CSV log", type=["csv"])
    if up is None:
        st.info("Upload a log.csv produced by scripts/run_demo.py.")
        st.stop()
    try:
        raw = pd.read_csv(up)
    except Exception as e:
        st.error(f"Failed to read CSV: {e}")
        st.stop()
    missing = [c for c in HEADER.split(",") if c not in raw.columns]
    if missing:
        st.error(f"Missing columns: {missing}")
        st.stop()
    metrics, df = metrics_from_log(raw.to_dict(orient="list"), dt)
    status.success(f"Loaded {len(df):,} cycles (time axis uses dt={dt})")

# KPI row
k = st.columns(5)
with k[0]: kpi(metrics, "rise_time", "Rise time 10→90% (s)")
with k[1]: kpi(metrics, "overshoot_pct", "Overshoot (%)", fmt="{:.2f}")
with k[2]: kpi(metrics, "settling_time", "Settling ±2% (s)")
with k[3]: kpi(metrics, "steady_state_error", "Final |error|")
with k[4]: kpi(metrics, "control_effort", "Control effort")

st.divider()

speed = df.melt(id_vars=["t"], value_vars=["actual_speed", "target_speed"],
                var_name="series", value_name="speed")
fig = px.line(speed, x="t", y="speed", color="series", title="Motor speed response")
fig.update_layout(xaxis_title="Time (s)", height=380)
st.plotly_chart(fig, use_container_width=True)

c1, c2 = st.columns(2)
with c1:
    fig_e = px.line(df, x="t", y="error", title="Speed error (target - actual)")
    fig_e.update_layout(xaxis_title="Time (s)", height=260)
    st.plotly_chart(fig_e, use_container_width=True)
with c2:
    fig_u = px.line(df, x="t", y="control_signal", title="Control signal")
    fig_u.update_layout(xaxis_title="Time (s)", height=260)
    st.plotly_chart(fig_u, use_container_width=True)

# ---------- Downloads ----------
st.subheader("Download current data")
st.download_button(
    "Download log (CSV)",
    data=to_log_csv(df).encode("utf-8"),
    file_name="log.csv",
    mime="text/csv",
    use_container_width=True,
)

st.caption(f"Refreshed: {time.strftime('%Y-%m-%d %H:%M:%S UTC', time.gmtime())}")
