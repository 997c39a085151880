import pytest

from generators.time_grid import grid_length, is_terminal, step_count, validate_grid


@pytest.mark.parametrize("timestep, endtime, expected", [
    (1, 30, 31),
    (0.5, 30.0, 61),
    (1 / 252, 1.0, 253),
    (1 / 12, 5, 61),
    (0.1, 1.0, 11),
    (1, 0, 1),
    (0.3, 1.0, 4),
])
def test_grid_length(timestep, endtime, expected):
    assert grid_length(timestep, endtime) == expected


def test_step_count_is_tolerant_of_round_off():
    # 0.3 / 0.1 == 2.9999999999999996 in binary floating point
    assert step_count(0.1, 0.3) == 3


def test_is_terminal_at_and_past_horizon():
    assert is_terminal(30.0, 1.0, 30.0)
    assert is_terminal(31.0, 1.0, 30.0)
    assert is_terminal(0.1 + 0.1 + 0.1, 0.1, 0.3)
    assert not is_terminal(29.0, 1.0, 30.0)


def test_is_terminal_when_next_point_overshoots():
    assert is_terminal(0.9, 0.3, 1.0)
    assert not is_terminal(0.6, 0.3, 1.0)


def test_validate_grid():
    with pytest.raises(ValueError):
        validate_grid(0, 30)
    with pytest.raises(ValueError):
        validate_grid(-1, 30)
    with pytest.raises(ValueError):
        validate_grid(1, -1)
    validate_grid(1, 0)
