"""
Jumpy3 Engine

Best-move search for Jumpy3, a two-player race game on a 16-cell track,
using depth-limited MiniMax and Alpha-Beta search.

## Architecture

The engine is organized into several key modules:

1. **board**: Board model and move generation
   - Piece and Player enums
   - Immutable 16-cell Board with jump/capture rules
   - Input validation and a numpy tensor view

2. **evaluation**: Static estimation functions
   - Abstract Evaluator interface (swappable design)
   - BasicEvaluator: King advancement
   - ImprovedEvaluator: King, pawn, path and exit-proximity terms

3. **search**: Search algorithms
   - MiniMax
   - Alpha-Beta pruning (same answers, fewer evaluations)

4. **driver**: Command-line programs
   - MiniMax, MiniMaxBlack, MiniMaxImproved, AlphaBeta
   - File-based logging

5. **utils**: Testing and benchmarking utilities
   - Reference suite with known results
   - MiniMax vs Alpha-Beta pruning benchmark

## Quick Start

### As a Python Library

```python
from jumpy_engine.board import Board, Player
from jumpy_engine.evaluation import BasicEvaluator
from jumpy_engine.search import AlphaBetaSearch

board = Board.from_string("WwwwxxxxxxxxbbbB")
engine = AlphaBetaSearch(BasicEvaluator())

result = engine.compute_best_move(board, depth=2, player=Player.WHITE)
print(result.best_board, result.estimate, result.positions_evaluated)
```

### From the Command Line

```bash
jumpy-alphabeta board1.txt board2.txt 2
python -m jumpy_engine.driver MiniMaxBlack board1.txt board2.txt 2
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from jumpy_engine.board import Board, Piece, Player
from jumpy_engine.evaluation import BasicEvaluator, Evaluator, ImprovedEvaluator
from jumpy_engine.search import AlphaBetaSearch, MiniMaxSearch, SearchResult

__all__ = [
    'Board',
    'Piece',
    'Player',
    'Evaluator',
    'BasicEvaluator',
    'ImprovedEvaluator',
    'MiniMaxSearch',
    'AlphaBetaSearch',
    'SearchResult',
]
