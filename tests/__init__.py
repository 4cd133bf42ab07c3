"""
Test suite for pbc (punch-board-calculator)

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
