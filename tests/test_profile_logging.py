import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from examples.profile_frames import log_summary, main, run_frames
from digirain.state import RainState
from digirain.timing import FrameTimer


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        return self.current


def test_run_frames_times_update_and_render():
    state = RainState.create(height=5, width=7, seed=2)
    timer = FrameTimer(clock=FakeClock())
    produced = run_frames(state, 4, timer)
    assert state.frames == 4
    assert produced > 0
    stats = timer.snapshot()
    assert stats["update"].count == 4
    assert stats["render"].count == 4


def test_log_summary_reports_sections(caplog):
    clock = FakeClock()
    timer = FrameTimer(clock=clock)
    with timer.section("render"):
        clock.advance(0.5)
    with timer.section("update"):
        clock.advance(0.1)

    with caplog.at_level(logging.INFO, logger="examples.profile_frames"):
        summary = log_summary(timer, index=7)

    assert [row["name"] for row in summary] == ["render", "update"]
    message = "".join(caplog.messages)
    assert "Batch 7" in message
    assert "render" in message


def test_main_prints_table(capsys):
    main(["--frames", "2", "--height", "4", "--width", "6", "--seed", "1"])
    out = capsys.readouterr().out
    assert "Section" in out
    assert "update" in out
    assert "render" in out
