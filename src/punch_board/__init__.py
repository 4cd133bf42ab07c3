"""
pbc (punch-board-calculator)

Envelope paper size and punch location for a 1-2-3 punch board, plus
decimal-to-fraction display helpers.
"""

__version__ = "0.0.0"
