"""
Driver Programs

Thin wrappers that connect the search engines to files and the console.
Each problem type selects an engine, an evaluator and the side to move:

    Problem           Engine      Evaluator   Player
    MiniMax           MiniMax     Basic       White
    MiniMaxBlack      MiniMax     Basic       Black
    MiniMaxImproved   MiniMax     Improved    White
    AlphaBeta         AlphaBeta   Basic       White

Program Flow:
    input file → validate_board_string() → compute_best_move()
               → three report lines on stdout → output file

Invocation:
    jumpy-minimax board1.txt board2.txt 2
    python -m jumpy_engine.driver AlphaBeta board1.txt board2.txt 2

Run without arguments, the per-problem programs ask for the same three
values on a single prompt line.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from jumpy_engine.board.board import Board
from jumpy_engine.board.pieces import Player
from jumpy_engine.board.validation import validate_board_string
from jumpy_engine.config import EngineConfig, load_config
from jumpy_engine.evaluation.basic import BasicEvaluator
from jumpy_engine.evaluation.improved import ImprovedEvaluator
from jumpy_engine.search.alphabeta import AlphaBetaSearch
from jumpy_engine.search.minimax import MiniMaxSearch
from jumpy_engine.search.result import SearchResult

LOGGER_NAME = "jumpy_engine"

PathLike = Union[str, Path]


def setup_logger(config: Optional[EngineConfig] = None) -> logging.Logger:
    """
    Setup file-based logger for driver runs.

    Args:
        config: Engine configuration (default: load_config())

    Returns:
        Configured logger instance
    """
    if config is None:
        config = load_config()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if config.debug else logging.INFO)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if not config.log_to_file:
        logger.addHandler(logging.NullHandler())
        return logger

    config.log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(config.log_path, mode='a', encoding='utf-8')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class ProblemType(Enum):
    """Program variants, valued by the name used in reports."""

    MIN_MAX = "MiniMax"
    MIN_MAX_BLACK = "MiniMaxBlack"
    MIN_MAX_IMPROVED = "MiniMaxImproved"
    ALPHA_BETA = "AlphaBeta"

    @classmethod
    def from_name(cls, name: str) -> "ProblemType":
        """
        Look up a problem type by its display name.

        Raises:
            ValueError: If no problem type has that name
        """
        for problem_type in cls:
            if problem_type.value == name:
                return problem_type
        valid = ", ".join(p.value for p in cls)
        raise ValueError(f"Invalid problem type: {name!r}. Valid values: {valid}")

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def player(self) -> Player:
        return Player.BLACK if self is ProblemType.MIN_MAX_BLACK else Player.WHITE

    def create_engine(self):
        """Build the engine/evaluator pair for this problem type."""
        evaluator = ImprovedEvaluator() if self is ProblemType.MIN_MAX_IMPROVED else BasicEvaluator()
        if self is ProblemType.ALPHA_BETA:
            return AlphaBetaSearch(evaluator)
        return MiniMaxSearch(evaluator)


@dataclass
class DriverArguments:
    """Positional program arguments."""

    input_path: Path
    output_path: Path
    depth: int


def parse_arguments(
    args: Sequence[str],
    prompt: Callable[[str], str] = input,
) -> DriverArguments:
    """
    Convert program arguments to DriverArguments.

    Args:
        args: [input_file, output_file, depth]. If empty, one line is read
              from prompt instead, e.g. "board1.txt board2.txt 2".
        prompt: Line reader used for the interactive fallback

    Returns:
        DriverArguments

    Raises:
        ValueError: If the argument count is wrong or depth is not an integer
    """
    tokens: List[str] = list(args)
    if not tokens:
        tokens = prompt("Enter input (e.g., board1.txt board2.txt 2): ").split()

    if len(tokens) != 3:
        raise ValueError(
            "Invalid argument count - Required format: [input_file] [output_file] [depth]"
        )

    input_path, output_path, depth_str = tokens
    try:
        depth = int(depth_str)
    except ValueError:
        raise ValueError(f"Invalid depth: {depth_str!r} is not an integer") from None

    return DriverArguments(Path(input_path), Path(output_path), depth)


def read_board(path: PathLike) -> Board:
    """
    Read and validate a board file.

    Surrounding whitespace (such as a trailing newline) is ignored.

    Raises:
        OSError: If the file cannot be read
        InvalidBoardError: If the board breaks the setup rules
    """
    text = Path(path).read_text(encoding="utf-8")
    return validate_board_string(text.strip())


def write_board(path: PathLike, board: Board) -> None:
    """Write the board's 16 characters, no trailing newline."""
    Path(path).write_text(board.to_string(), encoding="utf-8")


def report(result: SearchResult, problem_type: ProblemType, board: Board) -> None:
    """Print the three result lines to stdout."""
    print(f"Output board position: {board}")
    print(f"Positions evaluated by static estimation: {result.positions_evaluated}")
    print(f"{problem_type.display_name} estimate: {result.estimate}")


def run_problem(
    problem_type: ProblemType,
    input_path: PathLike,
    output_path: PathLike,
    depth: int,
) -> SearchResult:
    """
    Read a board, search it, report and write the chosen move.

    When the search returns no move (depth 0, a finished game, or no legal
    move), the input board is reported and written unchanged.

    Returns:
        SearchResult from the engine
    """
    logger = logging.getLogger(LOGGER_NAME)

    board = read_board(input_path)
    logger.info(
        f"{problem_type.display_name}: input={input_path}, board={board}, depth={depth}"
    )

    engine = problem_type.create_engine()
    result = engine.compute_best_move(board, depth, problem_type.player)

    output_board = result.best_board
    if output_board is None:
        logger.warning(f"{problem_type.display_name}: no move found, keeping input board")
        output_board = board

    report(result, problem_type, output_board)
    write_board(output_path, output_board)

    logger.info(
        f"{problem_type.display_name}: output={output_path}, board={output_board}, "
        f"estimate={result.estimate}, positions={result.positions_evaluated}"
    )
    return result


def main(
    problem_type: ProblemType,
    argv: Optional[Sequence[str]] = None,
    config: Optional[EngineConfig] = None,
) -> int:
    """
    Program entry point for one problem type.

    Returns:
        Process exit code (0 on success, 1 on bad input or I/O failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        logger = setup_logger(config)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        args = parse_arguments(argv)
        run_problem(problem_type, args.input_path, args.output_path, args.depth)
    except (ValueError, OSError) as e:
        logger.error(f"{problem_type.display_name} failed: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def minimax_main() -> int:
    return main(ProblemType.MIN_MAX)


def minimax_black_main() -> int:
    return main(ProblemType.MIN_MAX_BLACK)


def minimax_improved_main() -> int:
    return main(ProblemType.MIN_MAX_IMPROVED)


def alphabeta_main() -> int:
    return main(ProblemType.ALPHA_BETA)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for `python -m jumpy_engine.driver`."""
    parser = argparse.ArgumentParser(
        prog="python -m jumpy_engine.driver",
        description="Compute the best Jumpy3 move for a board file",
    )
    parser.add_argument(
        "problem",
        choices=[p.value for p in ProblemType],
        help="Engine/evaluator/player combination to run",
    )
    parser.add_argument("input_file", help="File holding the 16-character board")
    parser.add_argument("output_file", help="File to write the chosen board to")
    parser.add_argument("depth", type=int, help="Search depth in plies")
    return parser


def cli(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point taking the problem name as the first argument."""
    parsed = build_parser().parse_args(argv)
    return main(
        ProblemType.from_name(parsed.problem),
        [parsed.input_file, parsed.output_file, str(parsed.depth)],
    )
