"""
TicTacToe
=========
A 3x3 TicTacToe game for two humans, or a human against a computer
that never loses. The computer picks its moves with a full Minimax search.

Human plays X and always moves first. In computer mode the computer plays O.
"""

__version__ = "1.0.0"
