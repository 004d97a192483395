"""Tests for CLI interface."""

import argparse
import json

import pytest
from unittest.mock import patch

from astar_search.cli.main import main_cli, create_parser
from astar_search.cli.utils import parse_cell, save_results, format_duration, to_serializable
from astar_search.config import get_config


MAZE = """\
.
........
#######.
........
.
"""


@pytest.fixture
def maze_file(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text(MAZE)
    return path


class TestCLIParser:
    """Test CLI argument parsing."""

    def test_create_parser(self):
        parser = create_parser()
        assert parser.prog == 'astar-search'

    def test_solve_command_parsing(self):
        parser = create_parser()

        args = parser.parse_args(['solve', 'maze.txt', '--start', '0,0', '--goal', '0,4'])
        assert args.command == 'solve'
        assert args.grid_file == 'maze.txt'
        assert args.start == (0, 0)
        assert args.goal == (0, 4)
        assert args.diag is False
        assert args.tween is False
        assert args.render is False
        assert args.tie_break is None

        args = parser.parse_args([
            'solve', 'maze.txt', '-s', '1,2', '-g', '3,-4', '--diag', '--tween', '--render',
            '--tie-break', 'fifo'
        ])
        assert args.start == (1, 2)
        assert args.goal == (3, -4)
        assert args.diag is True
        assert args.tween is True
        assert args.render is True
        assert args.tie_break == 'fifo'

    def test_solve_requires_endpoints(self):
        parser = create_parser()

        with pytest.raises(SystemExit):
            parser.parse_args(['solve', 'maze.txt'])

    def test_config_command_parsing(self):
        parser = create_parser()

        args = parser.parse_args(['config', 'show'])
        assert args.command == 'config'
        assert args.config_action == 'show'

        args = parser.parse_args(['config', 'validate'])
        assert args.config_action == 'validate'

    def test_global_options(self):
        parser = create_parser()

        args = parser.parse_args(['-vv', '-c', 'grid.diagonal=true', 'config', 'show'])
        assert args.verbose == 2
        assert args.config == 'grid.diagonal=true'


class TestCLIUtils:
    """Test CLI helpers."""

    def test_parse_cell(self):
        assert parse_cell("3,4") == (3, 4)
        assert parse_cell("-1,0") == (-1, 0)

    @pytest.mark.parametrize("value", ["3", "a,b", "1,2,3"])
    def test_parse_cell_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_cell(value)

    def test_to_serializable(self):
        from collections import deque

        data = {'path': deque([(0, 0), (0, 1)]), 'cost': 2}

        assert to_serializable(data) == {'path': [[0, 0], [0, 1]], 'cost': 2}

    def test_save_results(self, tmp_path):
        output = tmp_path / "out" / "result.json"

        save_results({'path': [(1, 2)], 'success': True}, output)

        assert json.loads(output.read_text()) == {'path': [[1, 2]], 'success': True}

    def test_format_duration(self):
        assert format_duration(0.0000005).endswith("µs")
        assert format_duration(0.5) == "500.0ms"
        assert format_duration(2.5) == "2.50s"
        assert format_duration(125) == "2m 5.0s"


class TestCLICommands:
    """Test command execution."""

    def test_no_command(self):
        assert main_cli([]) == 1

    def test_solve_maze(self, maze_file, tmp_path):
        output = tmp_path / "result.json"

        exit_code = main_cli(['-q', '-o', str(output), 'solve', str(maze_file),
                              '--start', '0,0', '--goal', '0,4'])

        assert exit_code == 0
        result = json.loads(output.read_text())
        assert result['success'] is True
        assert result['path'][0] == [0, 0]
        assert result['path'][-1] == [0, 4]
        assert len(result['path']) == 19
        assert result['cost'] == 36
        assert result['termination_reason'] == 'goal_reached'
        assert result['stats']['nodes_expanded'] > 0

    def test_solve_prints_json(self, maze_file, capsys):
        exit_code = main_cli(['-q', 'solve', str(maze_file), '--start', '0,0', '--goal', '1,1'])

        assert exit_code == 0
        result = json.loads(capsys.readouterr().out)
        assert result['path'] == [[0, 0], [0, 1], [1, 1]]

    def test_solve_stdout_is_json(self, maze_file, capsys):
        """Without -o the summary and map go to stderr so stdout stays parseable."""
        exit_code = main_cli(['solve', str(maze_file), '--start', '0,0', '--goal', '1,1',
                              '--render'])

        captured = capsys.readouterr()
        assert exit_code == 0
        assert json.loads(captured.out)['cost'] == 4
        assert "Cost: 4" in captured.err
        assert "*" in captured.err

    def test_solve_tie_break(self, tmp_path, capsys):
        """Two equally cheap routes around a square; the policy picks which one."""
        square = tmp_path / "square.txt"
        square.write_text("..\n..\n")
        base = ['-q', 'solve', str(square), '--start', '0,0', '--goal', '1,1']

        assert main_cli(base) == 0
        assert json.loads(capsys.readouterr().out)['path'] == [[0, 0], [1, 0], [1, 1]]

        assert main_cli(base + ['--tie-break', 'fifo']) == 0
        assert json.loads(capsys.readouterr().out)['path'] == [[0, 0], [0, 1], [1, 1]]
        assert get_config().search.astar.tie_break == 'lifo'

    def test_solve_render(self, maze_file, tmp_path, capsys):
        main_cli(['-q', '-o', str(tmp_path / 'result.json'), 'solve', str(maze_file),
                  '--start', '0,0', '--goal', '2,1', '--render'])

        out = capsys.readouterr().out
        assert "***" in out

    def test_solve_unreachable(self, maze_file, tmp_path):
        output = tmp_path / "result.json"

        exit_code = main_cli(['-q', '-o', str(output), 'solve', str(maze_file),
                              '--start', '0,0', '--goal', '3,2'])

        assert exit_code == 1
        result = json.loads(output.read_text())
        assert result['success'] is False
        assert result['path'] is None

    def test_solve_missing_file(self, tmp_path):
        exit_code = main_cli(['-q', 'solve', str(tmp_path / "nope.txt"),
                              '--start', '0,0', '--goal', '0,1'])

        assert exit_code == 1

    def test_config_show(self, capsys):
        assert main_cli(['config', 'show']) == 0
        assert "tie_break" in capsys.readouterr().out

    def test_config_validate(self, capsys):
        assert main_cli(['config', 'validate']) == 0
        assert "valid" in capsys.readouterr().out

    def test_config_validate_bad_override(self, capsys):
        assert main_cli(['-c', 'search.astar.tie_break=random', 'config', 'validate']) == 1

    @patch('astar_search.cli.commands.solve_command', return_value=0)
    def test_solve_routing(self, mock_solve):
        assert main_cli(['solve', 'maze.txt', '-s', '0,0', '-g', '1,1']) == 0
        mock_solve.assert_called_once()

    @patch('astar_search.cli.commands.config_command', side_effect=KeyboardInterrupt)
    def test_keyboard_interrupt(self, mock_config):
        assert main_cli(['config', 'show']) == 130
