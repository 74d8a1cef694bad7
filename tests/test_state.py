import numpy as np

from digirain.grid import MAX_HEIGHT, MAX_WIDTH
from digirain.state import RainState


def test_default_state_uses_full_grid():
    state = RainState()
    assert (state.grid.height, state.grid.width) == (MAX_HEIGHT, MAX_WIDTH)
    assert state.frames == 0


def test_step_counts_frames_and_mutates_in_place():
    state = RainState.create(height=8, width=40, seed=3)
    grid = state.grid
    for _ in range(30):
        state.step()
    assert state.frames == 30
    assert state.grid is grid
    assert np.any(grid.glyphs != " ")


def test_same_seed_replays_identically():
    a = RainState.create(height=6, width=20, seed=42)
    b = RainState.create(height=6, width=20, seed=42)
    for _ in range(25):
        a.step()
        b.step()
    assert np.array_equal(a.grid.glyphs, b.grid.glyphs)
    assert np.array_equal(a.grid.run, b.grid.run)
    assert np.array_equal(a.grid.bright, b.grid.bright)


def test_reset_blanks_grid_and_reseeds():
    state = RainState.create(height=6, width=20, seed=1)
    for _ in range(40):
        state.step()
    state.reset(seed=1)
    assert state.frames == 0
    assert np.all(state.grid.glyphs == " ")
    assert not np.any(state.grid.run)

    fresh = RainState.create(height=6, width=20, seed=1)
    state.step()
    fresh.step()
    assert np.array_equal(state.grid.glyphs, fresh.grid.glyphs)
