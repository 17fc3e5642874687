import numpy as np
import pytest

from cave_pcg.model.carver import DIRECTIONS, DrunkAgentCarver, escalate_probability
from cave_pcg.model.grid import TileGrid
from cave_pcg.model.state import AgentState


def _carver(**overrides) -> DrunkAgentCarver:
    params = dict(
        outer_iterations=5,
        inner_steps=10,
        room_size_x=5,
        room_size_y=3,
        room_probability=0.1,
        room_probability_increment=0.05,
        direction_change_probability=0.2,
        direction_change_increment=0.03,
    )
    params.update(overrides)
    return DrunkAgentCarver(**params)


def test_directions_are_unit_four_connected():
    assert sorted(DIRECTIONS) == [(-1, 0), (0, -1), (0, 1), (1, 0)]


def test_escalation_is_capped():
    assert escalate_probability(0.1, 0.05) == pytest.approx(0.15)
    assert escalate_probability(0.98, 0.05) == 1.0
    assert escalate_probability(1.0, 0.5) == 1.0


def test_room_stamp_clipped_at_top_left_corner():
    grid = TileGrid(width=20, height=10)
    carver = _carver(outer_iterations=1, inner_steps=1, room_probability=1.0)
    result = carver.carve(grid, AgentState(0, 0), np.random.default_rng(0))

    assert result.rooms_stamped == 1
    assert result.grid.cells[:5, :3].sum() == 15
    assert result.grid.cells.sum() == 15
    assert result.grid.is_well_formed()


def test_room_stamp_clipped_at_bottom_right_corner():
    grid = TileGrid(width=20, height=10)
    carver = _carver(outer_iterations=1, inner_steps=1, room_probability=1.0)
    result = carver.carve(grid, AgentState(9, 19), np.random.default_rng(0))

    # Rows 7..9 and columns 18..19 remain inside the grid
    assert result.grid.cells[7:, 18:].sum() == 6
    assert result.grid.cells.sum() == 6


def test_out_of_bounds_agent_is_reseeded():
    grid = TileGrid(width=20, height=10)
    carver = _carver()
    for seed in range(20):
        result = carver.carve(grid, AgentState(-1, 5), np.random.default_rng(seed))
        assert result.grid.in_bounds(result.agent.x, result.agent.y)
        assert result.grid.cells.sum() > 0


def test_agent_stays_in_bounds_across_calls():
    grid = TileGrid(width=8, height=6)
    carver = _carver(outer_iterations=10, inner_steps=20)
    rng = np.random.default_rng(5)
    agent = AgentState(3, 4)
    for _ in range(10):
        result = carver.carve(grid, agent, rng)
        grid, agent = result.grid, result.agent
        assert grid.in_bounds(agent.x, agent.y)
        assert grid.is_well_formed()


def test_starting_cell_is_marked():
    grid = TileGrid(width=20, height=10)
    result = _carver().carve(grid, AgentState(5, 10), np.random.default_rng(1))
    assert result.grid.cells[5, 10] == 1


def test_without_rooms_only_the_path_is_marked():
    grid = TileGrid(width=20, height=10)
    carver = _carver(room_probability=0.0, room_probability_increment=0.0)
    result = carver.carve(grid, AgentState(5, 10), np.random.default_rng(2))

    assert result.rooms_stamped == 0
    marked = int(result.grid.cells.sum())
    assert 1 <= marked <= 5 * 10
    assert result.steps_taken <= 5 * 10


def test_carve_does_not_mutate_input():
    grid = TileGrid(width=20, height=10)
    _carver(room_probability=1.0).carve(grid, AgentState(5, 10), np.random.default_rng(3))
    assert grid.cells.sum() == 0


def test_carve_is_deterministic_for_seed():
    grid = TileGrid.random(20, 10, np.random.default_rng(9))
    carver = _carver()
    a = carver.carve(grid, AgentState(5, 10), np.random.default_rng(42))
    b = carver.carve(grid, AgentState(5, 10), np.random.default_rng(42))
    assert a.grid == b.grid
    assert a.agent == b.agent


def test_zero_steps_leaves_grid_unchanged():
    grid = TileGrid.random(20, 10, np.random.default_rng(4))
    result = _carver(outer_iterations=0).carve(grid, AgentState(5, 10),
                                               np.random.default_rng(0))
    assert result.grid == grid
    assert result.agent == AgentState(5, 10)
