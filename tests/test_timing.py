from giftmaze.config import DEFAULT_CONFIG, GameConfig
from giftmaze.engine.timing import TimingModel

def test_default_cadence():
    t = TimingModel()
    assert t.redraw_interval_ms == 100 and t.finish_delay_ms == 100
    assert t.redraw_frames == 6
    assert t.finish_delay_frames == 6

def test_frames_at_least_one():
    t = TimingModel(fps=30)
    assert t.frames(1) == 1
    assert t.frames(1000) == 30

def test_default_config():
    assert DEFAULT_CONFIG == GameConfig()
    assert DEFAULT_CONFIG.wall_threshold == 0.5
    assert DEFAULT_CONFIG.repair_threshold == 0.5
    assert DEFAULT_CONFIG.pick_threshold == 0.998
    assert DEFAULT_CONFIG.max_pick_passes is None
