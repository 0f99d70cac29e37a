import pytest

from config import AppConfig
from core.grid import in_bounds, cell_rect, window_size, border_rect, score_pos, title_pos

def test_in_bounds_edges():
    assert in_bounds((0, 0), 25)
    assert in_bounds((24, 24), 25)
    assert not in_bounds((25, 0), 25)
    assert not in_bounds((0, -1), 25)

def test_cell_rect_is_offset_and_scaled():
    cfg = AppConfig()
    assert cell_rect((0, 0), cfg) == (75, 75, 30, 30)
    assert cell_rect((24, 24), cfg) == (795, 795, 30, 30)
    assert cell_rect((6, 9), cfg) == (255, 345, 30, 30)

def test_window_and_hud_layout():
    cfg = AppConfig()
    assert window_size(cfg) == (900, 900)
    assert border_rect(cfg) == (70, 70, 760, 760)
    assert title_pos(cfg) == (70, 20)
    assert score_pos(cfg) == (70, 835)

def test_config_with_clones():
    cfg = AppConfig()
    small = cfg.with_(cell_size=10)
    assert small.cell_size == 10
    assert cfg.cell_size == 30
    assert small.window_px == 2 * 75 + 250

@pytest.mark.parametrize("kwargs", [
    {"cell_count": 5},              # start body no longer fits
    {"cell_size": 0},
    {"tick_interval": 0},
    {"fps": -1},
    {"start_body": ()},
    {"grid_offset": -3},
])
def test_config_validate_rejects(kwargs):
    with pytest.raises(ValueError):
        AppConfig(**kwargs).validate()

def test_config_validate_returns_self():
    cfg = AppConfig()
    assert cfg.validate() is cfg
