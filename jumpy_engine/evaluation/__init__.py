"""
Evaluation Module

This module provides the static estimation functions used at the leaves of
the search tree. Evaluators are SWAPPABLE: both search engines work with any
evaluator that implements the base interface and never check which one they
hold.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - BasicEvaluator: King-advancement score
    - ImprovedEvaluator: King, pawn, path and exit-proximity terms

Data Flow:
    Board → evaluator.evaluate() → int
                                   Positive = White advantage
                                   Negative = Black advantage
"""

from jumpy_engine.evaluation.base import INFINITY, WIN_SCORE, Evaluator
from jumpy_engine.evaluation.basic import BasicEvaluator
from jumpy_engine.evaluation.improved import ImprovedEvaluator

__all__ = ['Evaluator', 'BasicEvaluator', 'ImprovedEvaluator', 'WIN_SCORE', 'INFINITY']
