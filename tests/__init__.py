"""
Unit Tests for Jumpy3 Engine

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run with coverage
    pytest tests/ --cov=jumpy_engine --cov-report=html

    # Run specific test
    pytest tests/test_board.py::TestCapture::test_single_black_pawn_is_relocated

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
