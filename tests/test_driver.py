"""
Unit Tests for Driver Interface

Tests for the command-line programs, focusing on:
    - Problem type selection
    - Argument parsing and the interactive fallback
    - Board file I/O
    - Report format on stdout
    - Error handling and exit codes
"""

import logging

import pytest

from jumpy_engine.board import Board, InvalidBoardError, Player
from jumpy_engine.config import EngineConfig
from jumpy_engine.driver import (
    ProblemType,
    main,
    parse_arguments,
    read_board,
    run_problem,
    setup_logger,
    write_board,
)
from jumpy_engine.driver.interface import LOGGER_NAME, build_parser, cli
from jumpy_engine.evaluation import BasicEvaluator, ImprovedEvaluator
from jumpy_engine.search import AlphaBetaSearch, MiniMaxSearch

START = "WwwwxxxxxxxxbbbB"


@pytest.fixture
def quiet_config(tmp_path):
    """Config that keeps logs inside the test directory."""
    return EngineConfig(log_dir=tmp_path / "logs")


@pytest.fixture
def board_file(tmp_path):
    path = tmp_path / "board1.txt"
    path.write_text(START, encoding="utf-8")
    return path


class TestProblemType:
    """Tests for ProblemType."""

    def test_from_name(self):
        assert ProblemType.from_name("MiniMax") is ProblemType.MIN_MAX
        assert ProblemType.from_name("MiniMaxBlack") is ProblemType.MIN_MAX_BLACK
        assert ProblemType.from_name("MiniMaxImproved") is ProblemType.MIN_MAX_IMPROVED
        assert ProblemType.from_name("AlphaBeta") is ProblemType.ALPHA_BETA

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Invalid problem type"):
            ProblemType.from_name("minimax")

    def test_players(self):
        assert ProblemType.MIN_MAX_BLACK.player is Player.BLACK
        assert ProblemType.ALPHA_BETA.player is Player.WHITE

    @pytest.mark.parametrize(
        "problem_type, engine_cls, evaluator_cls",
        [
            (ProblemType.MIN_MAX, MiniMaxSearch, BasicEvaluator),
            (ProblemType.MIN_MAX_BLACK, MiniMaxSearch, BasicEvaluator),
            (ProblemType.MIN_MAX_IMPROVED, MiniMaxSearch, ImprovedEvaluator),
            (ProblemType.ALPHA_BETA, AlphaBetaSearch, BasicEvaluator),
        ],
    )
    def test_create_engine(self, problem_type, engine_cls, evaluator_cls):
        engine = problem_type.create_engine()
        assert isinstance(engine, engine_cls)
        assert isinstance(engine.evaluator, evaluator_cls)


class TestParseArguments:
    """Tests for parse_arguments."""

    def test_three_arguments(self):
        args = parse_arguments(["in.txt", "out.txt", "3"])

        assert str(args.input_path) == "in.txt"
        assert str(args.output_path) == "out.txt"
        assert args.depth == 3

    def test_wrong_count(self):
        with pytest.raises(ValueError, match="Invalid argument count"):
            parse_arguments(["in.txt", "out.txt"])

    def test_non_integer_depth(self):
        with pytest.raises(ValueError, match="Invalid depth"):
            parse_arguments(["in.txt", "out.txt", "two"])

    def test_interactive_fallback(self):
        args = parse_arguments([], prompt=lambda message: "a.txt b.txt 2")

        assert str(args.input_path) == "a.txt"
        assert args.depth == 2

    def test_interactive_wrong_count(self):
        with pytest.raises(ValueError, match="Invalid argument count"):
            parse_arguments([], prompt=lambda message: "a.txt")


class TestBoardFiles:
    """Tests for read_board / write_board."""

    def test_read_board(self, board_file):
        assert str(read_board(board_file)) == START

    def test_read_board_ignores_trailing_newline(self, tmp_path):
        path = tmp_path / "board.txt"
        path.write_text(START + "\n", encoding="utf-8")

        assert str(read_board(path)) == START

    def test_read_invalid_board(self, tmp_path):
        path = tmp_path / "board.txt"
        path.write_text("WWwwxxxxxxxxbbbB", encoding="utf-8")

        with pytest.raises(InvalidBoardError):
            read_board(path)

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_board(tmp_path / "missing.txt")

    def test_write_board_has_no_newline(self, tmp_path):
        path = tmp_path / "out.txt"

        write_board(path, Board.from_string(START))

        assert path.read_bytes() == START.encode("utf-8")


class TestRunProblem:
    """Tests for the full read/search/report/write pipeline."""

    @pytest.mark.parametrize(
        "problem_type, board, positions, estimate",
        [
            (ProblemType.MIN_MAX, "xwwwWxxxxxxxbbbB", 16, 0),
            (ProblemType.MIN_MAX_BLACK, "WwwwxxxxxxxBbbbx", 16, 0),
            (ProblemType.MIN_MAX_IMPROVED, "xwwwWxxxxxxxbbbB", 16, 12),
            (ProblemType.ALPHA_BETA, "xwwwWxxxxxxxbbbB", 7, 0),
        ],
    )
    def test_reference_output(self, problem_type, board, positions, estimate, board_file, tmp_path, capsys):
        output_path = tmp_path / "board2.txt"

        run_problem(problem_type, board_file, output_path, 2)

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            f"Output board position: {board}",
            f"Positions evaluated by static estimation: {positions}",
            f"{problem_type.display_name} estimate: {estimate}",
        ]
        assert output_path.read_text(encoding="utf-8") == board

    def test_no_move_keeps_input_board(self, board_file, tmp_path, capsys):
        output_path = tmp_path / "board2.txt"

        result = run_problem(ProblemType.MIN_MAX, board_file, output_path, 0)

        assert result.best_board is None
        assert output_path.read_text(encoding="utf-8") == START
        assert f"Output board position: {START}" in capsys.readouterr().out


class TestMain:
    """Tests for the program entry points."""

    def test_success(self, board_file, tmp_path, quiet_config, capsys):
        output_path = tmp_path / "board2.txt"

        code = main(ProblemType.ALPHA_BETA, [str(board_file), str(output_path), "2"], quiet_config)

        assert code == 0
        assert "AlphaBeta estimate: 0" in capsys.readouterr().out
        assert quiet_config.log_path.exists()

    def test_invalid_board_exit_code(self, tmp_path, quiet_config, capsys):
        path = tmp_path / "board1.txt"
        path.write_text("Wwwwxxxxxxxxbbbz", encoding="utf-8")

        code = main(ProblemType.MIN_MAX, [str(path), str(tmp_path / "out.txt"), "2"], quiet_config)

        assert code == 1
        assert "Invalid piece character" in capsys.readouterr().err
        assert not (tmp_path / "out.txt").exists()

    def test_missing_input_exit_code(self, tmp_path, quiet_config, capsys):
        code = main(
            ProblemType.MIN_MAX,
            [str(tmp_path / "nope.txt"), str(tmp_path / "out.txt"), "2"],
            quiet_config,
        )

        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_errors_are_logged(self, tmp_path, quiet_config):
        main(ProblemType.MIN_MAX, ["only-one-argument"], quiet_config)

        log_text = quiet_config.log_path.read_text(encoding="utf-8")
        assert "MiniMax failed" in log_text
        assert "Invalid argument count" in log_text

    def test_cli_with_problem_name(self, board_file, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("JUMPY_LOG_TO_FILE", "0")
        monkeypatch.setenv("JUMPY_CONFIG_TOML", str(tmp_path / "absent.toml"))
        output_path = tmp_path / "board2.txt"

        code = cli(["MiniMaxBlack", str(board_file), str(output_path), "2"])

        assert code == 0
        assert output_path.read_text(encoding="utf-8") == "WwwwxxxxxxxBbbbx"
        assert "MiniMaxBlack estimate: 0" in capsys.readouterr().out

    def test_parser_rejects_unknown_problem(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["Negamax", "a", "b", "2"])


class TestSetupLogger:
    """Tests for logger configuration."""

    def test_file_handler(self, quiet_config):
        logger = setup_logger(quiet_config)

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.INFO
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)

    def test_debug_level(self, tmp_path):
        logger = setup_logger(EngineConfig(log_dir=tmp_path, debug=True))
        assert logger.level == logging.DEBUG

    def test_no_file_logging(self, tmp_path):
        logger = setup_logger(EngineConfig(log_dir=tmp_path / "unused", log_to_file=False))

        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)
        assert not (tmp_path / "unused").exists()

    def test_repeated_setup_does_not_stack_handlers(self, quiet_config):
        setup_logger(quiet_config)
        logger = setup_logger(quiet_config)

        assert len(logger.handlers) == 1
