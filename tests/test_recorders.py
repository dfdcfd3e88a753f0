import io

from motorsim.config import SimConfig
from motorsim.experiments.recorders import HEADER, ConsoleRecorder, CsvRecorder, MemoryRecorder
from motorsim.experiments.sim import run


def test_csv_header_and_row_format(tmp_path):
    path = tmp_path / "log.csv"
    with CsvRecorder(path) as rec:
        assert rec.ok
        run(SimConfig(cycles=3), recorders=[rec])
    lines = path.read_text().splitlines()
    assert lines[0] == HEADER == "cycle,target_speed,actual_speed,error,control_signal"
    assert lines[1] == "0,100.0000,45.1369,54.8631,90.5000"
    assert len(lines) == 4
    assert [l.split(",")[0] for l in lines[1:]] == ["0", "1", "2"]


def test_csv_negative_values_keep_four_decimals(tmp_path):
    path = tmp_path / "log.csv"
    with CsvRecorder(path) as rec:
        rec.record(7, -1.0, 2.5, -3.25, 0.00004)
    assert path.read_text().splitlines()[1] == "7,-1.0000,2.5000,-3.2500,0.0000"


def test_unopenable_csv_does_not_stop_the_run(tmp_path, capsys):
    rec = CsvRecorder(tmp_path / "missing_dir" / "log.csv")
    assert not rec.ok
    mem = MemoryRecorder()
    run(SimConfig(cycles=10), recorders=[rec, mem])
    rec.close()
    assert len(mem.records) == 10
    err = capsys.readouterr().err
    assert "Continuing without file logging" in err


def test_close_is_idempotent(tmp_path):
    rec = CsvRecorder(tmp_path / "log.csv")
    rec.close(); rec.close()
    assert not rec.ok
    rec.record(0, 1.0, 1.0, 0.0, 0.0)
    assert (tmp_path / "log.csv").read_text() == HEADER + "\n"


def test_console_line_format():
    buf = io.StringIO()
    ConsoleRecorder(buf).record(0, 100.0, 45.136875, 54.863125, 90.5)
    assert buf.getvalue() == "[Cycle 000] Target: 100.00 | Speed: 45.14 | Error: 54.86 | Output: 90.50\n"


def test_console_defaults_to_stdout(capsys):
    ConsoleRecorder().record(12, 1.0, 0.5, 0.5, 2.0)
    assert capsys.readouterr().out.startswith("[Cycle 012]")


class _FlushCounter(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def test_console_flushes_every_line():
    buf = _FlushCounter()
    rec = ConsoleRecorder(buf)
    rec.record(0, 1.0, 0.5, 0.5, 2.0)
    rec.record(1, 1.0, 0.7, 0.3, 1.0)
    assert buf.flushes == 2
