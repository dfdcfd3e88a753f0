import sys
from typing import List, NamedTuple, Protocol

HEADER = "cycle,target_speed,actual_speed,error,control_signal"


class CycleRecord(NamedTuple):
    cycle: int
    target_speed: float
    actual_speed: float
    error: float
    control_signal: float


class Recorder(Protocol):
    def record(self, cycle: int, target_speed: float, actual_speed: float,
               error: float, control_signal: float) -> None: ...


class ConsoleRecorder:
    """One status line per cycle, for watching a run live."""
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def record(self, cycle, target_speed, actual_speed, error, control_signal):
        print(f"[Cycle {cycle:03d}] Target: {target_speed:.2f} | Speed: {actual_speed:.2f} | "
              f"Error: {error:.2f} | Output: {control_signal:.2f}", file=self.stream, flush=True)


class CsvRecorder:
    """
    Writes the run log as CSV, one row per cycle, 4 decimals on every real column.
    If the destination cannot be opened the recorder reports it on stderr and
    turns into a no-op so the simulation keeps going without file logging.
    """
    def __init__(self, path):
        self.path = str(path)
        try:
            self._f = open(self.path, "w", newline="")
        except OSError as e:
            print(f"Error opening log file: {e}", file=sys.stderr)
            print("Failed to open log file. Continuing without file logging.", file=sys.stderr)
            self._f = None
        else:
            self._f.write(HEADER + "\n")

    @property
    def ok(self) -> bool:
        return self._f is not None

    def record(self, cycle, target_speed, actual_speed, error, control_signal):
        if self._f is None:
            return
        self._f.write(f"{cycle:d},{target_speed:.4f},{actual_speed:.4f},{error:.4f},{control_signal:.4f}\n")

    def close(self):
        if self._f is not None:
            self._f.close()
            self._f = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class MemoryRecorder:
    def __init__(self):
        self.records: List[CycleRecord] = []

    def record(self, cycle, target_speed, actual_speed, error, control_signal):
        self.records.append(CycleRecord(cycle, target_speed, actual_speed, error, control_signal))
