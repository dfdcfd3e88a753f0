#!/usr/bin/env python3
"""
Single closed-loop speed-control run with live console output and a CSV log.

CLI:
  python scripts/run_demo.py                       # default 200-cycle run -> log.csv
  python scripts/run_demo.py --kp 1.0 --realtime   # override gains, pace at wall-clock speed
  python scripts/run_demo.py --config my_run.json --plots outputs
"""
from __future__ import annotations
import argparse
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from motorsim.config import SimConfig, load_config
from motorsim.experiments.sim import run
from motorsim.experiments.pacing import WallClockPacer
from motorsim.experiments.recorders import ConsoleRecorder, CsvRecorder


def build_config(args) -> SimConfig:
    cfg = load_config(args.config) if args.config else SimConfig()
    overrides = {k: v for k, v in dict(
        target_speed=args.target, kp=args.kp, ki=args.ki, kd=args.kd,
        dt=args.dt, cycles=args.cycles, inertia=args.inertia,
        friction=args.friction, log_path=args.log,
    ).items() if v is not None}
    return cfg.replace(**overrides) if overrides else cfg


def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", type=str, default=None, help="JSON file with SimConfig fields")
    ap.add_argument("--target", type=float, default=None, help="target speed (RPM)")
    ap.add_argument("--kp", type=float, default=None)
    ap.add_argument("--ki", type=float, default=None)
    ap.add_argument("--kd", type=float, default=None)
    ap.add_argument("--dt", type=float, default=None, help="time step (s)")
    ap.add_argument("--cycles", type=int, default=None, help="number of simulation cycles")
    ap.add_argument("--inertia", type=float, default=None)
    ap.add_argument("--friction", type=float, default=None)
    ap.add_argument("--log", type=str, default=None, help="CSV output path")
    ap.add_argument("--realtime", action="store_true", help="sleep dt between cycles")
    ap.add_argument("--quiet", action="store_true", help="no per-cycle console lines")
    ap.add_argument("--plots", type=str, default=None, help="directory for PNG plots")
    args = ap.parse_args(argv)

    try:
        cfg = build_config(args)
    except ValueError as e:
        print(f"[sim] invalid configuration: {e}", file=sys.stderr)
        return 2

    print("Starting PID Motor Control Simulation...")
    print(f"Target Speed: {cfg.target_speed:.2f} RPM")
    print(f"PID Gains: Kp={cfg.kp:.2f}, Ki={cfg.ki:.2f}, Kd={cfg.kd:.2f}")
    print(f"Logging data to {cfg.log_path}\n")

    with CsvRecorder(cfg.log_path) as csv_rec:
        recorders = [csv_rec] if args.quiet else [ConsoleRecorder(), csv_rec]
        log = run(cfg, recorders=recorders, pacer=WallClockPacer() if args.realtime else None)

    print(f"\nSimulation finished. Data saved to {cfg.log_path}")
    print(f"To visualize, open {cfg.log_path} in a spreadsheet program or use a plotting script.")

    if args.plots:
        # matplotlib is only needed here; files only, no window
        import matplotlib
        matplotlib.use('Agg')
        from motorsim.analysis.metrics import metrics_from_log
        from motorsim.analysis.plots import plot_timeseries
        out = Path(args.plots); out.mkdir(parents=True, exist_ok=True)
        metrics, df = metrics_from_log(log, cfg.dt)
        for p in plot_timeseries(df, str(out / "run")):
            print(f"[sim] wrote {p}", flush=True)
        for k, v in metrics.items():
            print(f"[sim] {k}: {v:.4f}", flush=True)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
