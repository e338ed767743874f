"""
Jumpy3 Engine Testing and Benchmarking

This module provides a reference suite and a pruning benchmark for the
search engines.

Test Suites:
    1. Reference Suite: positions with known results per problem type
       - Best board, positions evaluated and estimate are all checked
       - Every problem type (engine/evaluator/player) is exercised

    2. Pruning Benchmark: random valid boards at several depths
       - MiniMax and Alpha-Beta must agree on move and estimate
       - Reports how many evaluations pruning saves

Evaluation Metrics:
    - Passed cases per problem type
    - Positions evaluated by each engine
    - Time per depth
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np
from tqdm import tqdm

from jumpy_engine.board.board import BOARD_SIZE, Board
from jumpy_engine.board.pieces import Piece, Player
from jumpy_engine.board.validation import MAX_PAWNS, validate_board_string
from jumpy_engine.driver.interface import ProblemType
from jumpy_engine.evaluation.base import Evaluator
from jumpy_engine.evaluation.basic import BasicEvaluator
from jumpy_engine.search.alphabeta import AlphaBetaSearch
from jumpy_engine.search.minimax import MiniMaxSearch

logger = logging.getLogger(__name__)


@dataclass
class ExpectedResult:
    """
    Known outcome of one problem type on a reference case.

    Attributes:
        board: Expected best board (16-character string)
        positions_evaluated: Expected number of static evaluations
        estimate: Expected backed-up score
    """
    board: str
    positions_evaluated: int
    estimate: int


@dataclass
class ReferenceCase:
    """
    A reference position with expected results per problem type.

    Attributes:
        board: Input board string
        depth: Search depth
        expected: Expected result for each problem type
        id: Case identifier
    """
    board: str
    depth: int
    expected: Dict[ProblemType, ExpectedResult] = field(default_factory=dict)
    id: str = ""


@dataclass
class CaseResult:
    """
    Result of running one problem type on one reference case.

    Attributes:
        case: The reference case
        problem_type: Problem type that was run
        found_board: Board the engine chose ("" if none)
        positions_evaluated: Evaluations performed
        estimate: Score returned
        correct: Whether everything matched the expectation
        time_taken: Time spent searching (seconds)
    """
    case: ReferenceCase
    problem_type: ProblemType
    found_board: str
    positions_evaluated: int
    estimate: int
    correct: bool
    time_taken: float


# ============================================================================
# Reference Suite
# ============================================================================

REFERENCE_CASES = [
    ReferenceCase(
        id="REF.01",
        board="WwwwxxxxxxxxbbbB",
        depth=2,
        expected={
            ProblemType.MIN_MAX: ExpectedResult("xwwwWxxxxxxxbbbB", 16, 0),
            ProblemType.MIN_MAX_BLACK: ExpectedResult("WwwwxxxxxxxBbbbx", 16, 0),
            ProblemType.MIN_MAX_IMPROVED: ExpectedResult("xwwwWxxxxxxxbbbB", 16, 12),
            ProblemType.ALPHA_BETA: ExpectedResult("xwwwWxxxxxxxbbbB", 7, 0),
        },
    ),
]


def run_case(case: ReferenceCase, problem_type: ProblemType, verbose: bool = False) -> CaseResult:
    """
    Run one problem type on one reference case.

    Args:
        case: Reference case
        problem_type: Problem type to run, must be in case.expected
        verbose: If True, print detailed output

    Returns:
        CaseResult
    """
    expected = case.expected[problem_type]
    board = validate_board_string(case.board)
    engine = problem_type.create_engine()

    start_time = time.time()
    result = engine.compute_best_move(board, case.depth, problem_type.player)
    time_taken = time.time() - start_time

    found_board = str(result.best_board) if result.best_board is not None else ""
    correct = (
        found_board == expected.board
        and result.positions_evaluated == expected.positions_evaluated
        and result.estimate == expected.estimate
    )

    if verbose:
        print(f"\n{case.id} {problem_type.display_name} (depth {case.depth})")
        print(f"  Board: {found_board} (expected {expected.board})")
        print(f"  Positions: {result.positions_evaluated} (expected {expected.positions_evaluated})")
        print(f"  Estimate: {result.estimate} (expected {expected.estimate})")
        print(f"  Result: {'PASS' if correct else 'FAIL'}")

    if not correct:
        logger.warning(
            f"{case.id} {problem_type.display_name} mismatch: got "
            f"({found_board}, {result.positions_evaluated}, {result.estimate}), expected "
            f"({expected.board}, {expected.positions_evaluated}, {expected.estimate})"
        )

    return CaseResult(
        case=case,
        problem_type=problem_type,
        found_board=found_board,
        positions_evaluated=result.positions_evaluated,
        estimate=result.estimate,
        correct=correct,
        time_taken=time_taken,
    )


def run_reference_suite(
    cases: Optional[Sequence[ReferenceCase]] = None,
    verbose: bool = True,
) -> Dict[str, Any]:
    """
    Run every problem type on every reference case.

    Args:
        cases: Cases to run (default: REFERENCE_CASES)
        verbose: If True, print detailed results

    Returns:
        Dictionary with test results:
            - passed: Number of passing (case, problem type) pairs
            - total: Number of pairs run
            - by_type: Passed count per ProblemType
            - results: List of CaseResult objects
            - failures: List of failing CaseResult objects
    """
    if cases is None:
        cases = REFERENCE_CASES

    if verbose:
        print("=" * 70)
        print("JUMPY3 REFERENCE SUITE")
        print("=" * 70)

    results = []
    by_type = {problem_type: 0 for problem_type in ProblemType}

    for case in cases:
        for problem_type in case.expected:
            result = run_case(case, problem_type, verbose=verbose)
            results.append(result)
            if result.correct:
                by_type[problem_type] += 1

    passed = sum(1 for r in results if r.correct)

    if verbose:
        print("\n" + "=" * 70)
        print("SUMMARY")
        print("=" * 70)
        print(f"Total tests: {len(results)}")
        print(f"Passed: {passed}")
        print(f"Failed: {len(results) - passed}")
        for problem_type, count in by_type.items():
            print(f"{problem_type.display_name:<25}: {count:3d}/{len(cases)}")

    return {
        'passed': passed,
        'total': len(results),
        'by_type': by_type,
        'results': results,
        'failures': [r for r in results if not r.correct],
    }


# ============================================================================
# Pruning Benchmark
# ============================================================================

def random_board(rng: np.random.Generator) -> Board:
    """
    Draw a random board that passes input validation.

    Each side gets exactly one king and 0 to 3 pawns, placed on distinct
    random cells.

    Args:
        rng: numpy random generator

    Returns:
        Board
    """
    white_pawns = int(rng.integers(0, MAX_PAWNS + 1))
    black_pawns = int(rng.integers(0, MAX_PAWNS + 1))

    pieces = (
        [Piece.WHITE_KING, Piece.BLACK_KING]
        + [Piece.WHITE_PAWN] * white_pawns
        + [Piece.BLACK_PAWN] * black_pawns
    )
    cells = [Piece.EMPTY] * BOARD_SIZE
    for piece, index in zip(pieces, rng.permutation(BOARD_SIZE)):
        cells[int(index)] = piece

    return Board(tuple(cells))


def benchmark_pruning(
    boards: Iterable[Board],
    depths: Sequence[int],
    evaluator: Optional[Evaluator] = None,
    player: Player = Player.WHITE,
    show_progress: bool = True,
) -> List[Dict[str, Any]]:
    """
    Compare MiniMax and Alpha-Beta on the same boards.

    Args:
        boards: Boards to search
        depths: Depths to search each board at
        evaluator: Static estimator (default: BasicEvaluator)
        player: Side to move at the root
        show_progress: Show a tqdm progress bar per depth

    Returns:
        One dict per depth with:
            - depth
            - boards: Number of boards searched
            - minimax_positions / alphabeta_positions: Total evaluations
            - mismatches: Boards where the engines disagreed
            - minimax_time / alphabeta_time: Total seconds

    """
    if evaluator is None:
        evaluator = BasicEvaluator()

    boards = list(boards)
    minimax = MiniMaxSearch(evaluator)
    alphabeta = AlphaBetaSearch(evaluator)

    summary = []
    for depth in depths:
        row = {
            'depth': depth,
            'boards': len(boards),
            'minimax_positions': 0,
            'alphabeta_positions': 0,
            'mismatches': 0,
            'minimax_time': 0.0,
            'alphabeta_time': 0.0,
        }

        for board in tqdm(boards, desc=f"Depth {depth}", disable=not show_progress):
            start_time = time.time()
            full = minimax.compute_best_move(board, depth, player)
            row['minimax_time'] += time.time() - start_time

            start_time = time.time()
            pruned = alphabeta.compute_best_move(board, depth, player)
            row['alphabeta_time'] += time.time() - start_time

            row['minimax_positions'] += full.positions_evaluated
            row['alphabeta_positions'] += pruned.positions_evaluated

            if full.best_board != pruned.best_board or full.estimate != pruned.estimate:
                row['mismatches'] += 1
                logger.error(
                    f"Engines disagree on {board} at depth {depth}: "
                    f"minimax=({full.best_board}, {full.estimate}), "
                    f"alphabeta=({pruned.best_board}, {pruned.estimate})"
                )

        summary.append(row)

    return summary
