"""
Driver Interface

Command-line programs wrapping the Jumpy3 search engines. Each program reads
a board from a file, searches it to the requested depth and reports:

    Output board position: xwwwWxxxxxxxbbbB
    Positions evaluated by static estimation: 16
    MiniMax estimate: 0

The chosen board is also written to the output file.
"""

from jumpy_engine.driver.interface import (
    ProblemType,
    main,
    parse_arguments,
    read_board,
    run_problem,
    setup_logger,
    write_board,
)

__all__ = [
    'ProblemType',
    'main',
    'parse_arguments',
    'read_board',
    'run_problem',
    'setup_logger',
    'write_board',
]
