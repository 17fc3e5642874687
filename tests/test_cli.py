import numpy as np

from cave_pcg.export.console import MAP_FOOTER, MAP_HEADER, format_grid
from cave_pcg.main import main


def test_format_grid_banners_and_rows():
    text = format_grid(np.array([[0, 1], [1, 0]]))
    assert text.splitlines() == [MAP_HEADER, "0 1", "1 0", MAP_FOOTER]


def test_main_prints_every_iteration(capsys):
    assert main(["--seed", "42"]) == 0
    out = capsys.readouterr().out
    assert "--- CELLULAR AUTOMATA AND DRUNK AGENT SIMULATION ---" in out
    assert "Initial map state:" in out
    for i in range(1, 6):
        assert f"--- Iteration {i} ---" in out
    assert out.count(MAP_HEADER) == 6
    assert "--- Simulation Finished ---" in out
    assert "Random Seed: 42" in out


def test_map_rows_are_space_separated_bits(capsys):
    main(["--seed", "1", "--iterations", "1", "--no-summary"])
    out = capsys.readouterr().out
    lines = out.splitlines()
    start = lines.index(MAP_HEADER)
    rows = lines[start + 1:start + 11]
    assert lines[start + 11] == MAP_FOOTER
    for row in rows:
        assert row.split() and set(row.split()) <= {"0", "1"}
        assert len(row.split()) == 20


def test_quiet_suppresses_output(capsys):
    assert main(["--quiet", "--seed", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_missing_config_returns_error(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
    assert "Configuration file not found" in capsys.readouterr().err


def test_in_place_mode_from_cli(capsys):
    assert main(["--mode", "in_place", "--seed", "4", "--iterations", "2"]) == 0
    assert "--- Iteration 2 ---" in capsys.readouterr().out
