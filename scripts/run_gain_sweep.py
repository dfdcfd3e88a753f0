#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run a grid sweep over PID gains (Kp, Ki, Kd) on the same motor and emit:
  - sweep_raw.csv       (one row per gain triple: config + response metrics)
  - sweep_report.md     (runs ranked by settling time, then overshoot)

CLI:
  python scripts/run_gain_sweep.py --outdir outputs/sweep --kp 0.25 0.5 1.0 --ki 0 0.1 --kd 0 0.02
"""

from __future__ import annotations
import argparse
import os
import sys
from pathlib import Path

import pandas as pd

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from motorsim.config import SimConfig
from motorsim.analysis.metrics import metrics_from_log
from motorsim.experiments.scenarios import gain_grid
from motorsim.experiments.sim import run


def log(msg: str) -> None:
    print(f"[sweep] {msg}", flush=True)


def run_point(base: SimConfig, kp: float, ki: float, kd: float) -> dict:
    cfg = base.replace(kp=kp, ki=ki, kd=kd)
    metrics, _ = metrics_from_log(run(cfg), cfg.dt)
    row = {k: v for k, v in cfg.to_dict().items() if k != "log_path"}
    row.update(metrics)
    return row


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--outdir", type=str, default="outputs/sweep", help="output directory")
    ap.add_argument("--kp", type=float, nargs="+", default=[0.25, 0.5, 1.0, 2.0])
    ap.add_argument("--ki", type=float, nargs="+", default=[0.0, 0.1, 0.5])
    ap.add_argument("--kd", type=float, nargs="+", default=[0.0, 0.02, 0.08])
    ap.add_argument("--cycles", type=int, default=200, help="cycles per run")
    ap.add_argument("--dt", type=float, default=0.05, help="time step (s)")
    ap.add_argument("--target", type=float, default=100.0, help="target speed (RPM)")
    args = ap.parse_args()

    try:
        base = SimConfig(target_speed=args.target, cycles=args.cycles, dt=args.dt)
    except ValueError as e:
        print(f"[sweep] invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    raw_path = outdir / "sweep_raw.csv"
    report_path = outdir / "sweep_report.md"

    grid = gain_grid(args.kp, args.ki, args.kd)
    rows = []
    for kp, ki, kd in grid:
        rows.append(run_point(base, kp, ki, kd))
        if len(rows) % 10 == 0 or len(rows) == len(grid):
            log(f"{len(rows)}/{len(grid)} runs...")

    raw_df = pd.DataFrame(rows)
    raw_df.to_csv(raw_path, index=False)

    ranked = (raw_df
              .sort_values(["settling_time", "overshoot_pct"], na_position="last")
              [["kp", "ki", "kd", "rise_time", "overshoot_pct", "settling_time",
                "steady_state_error", "control_effort"]])
    report_path.write_text(
        f"# Gain sweep\n\n"
        f"- runs: **{len(raw_df)}**\n"
        f"- target: **{base.target_speed}**, dt: **{base.dt}**, cycles: **{base.cycles}**\n"
        f"- settled runs: **{int(raw_df['settling_time'].notna().sum())}**\n\n"
        f"{ranked.to_markdown(index=False, floatfmt='.4f')}\n"
    )

    log("Done. Wrote:\n"
        f"- {raw_path}\n"
        f"- {report_path}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)
