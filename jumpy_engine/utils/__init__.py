"""
Utilities Module

This module provides utility functions for testing and benchmarking the
Jumpy3 engines.

Key Components:
    - Reference suite: positions with known results for every problem type
    - random_board: Valid random positions for property checks
    - benchmark_pruning: MiniMax vs Alpha-Beta evaluation counts

Success Metrics:
    - Reference suite: all cases pass
    - Pruning benchmark: zero mismatches between the two engines
"""

from jumpy_engine.utils.testing import (
    REFERENCE_CASES,
    benchmark_pruning,
    random_board,
    run_reference_suite,
)

__all__ = [
    'REFERENCE_CASES',
    'benchmark_pruning',
    'random_board',
    'run_reference_suite',
]
