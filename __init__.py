"""
Console TicTacToe Project
=========================
Play TicTacToe against the computer in a terminal.
The engine keeps the board and the score across rounds;
the computer answers every move with a random empty cell.

Board indices (row-major):  0 1 2 / 3 4 5 / 6 7 8
"""

__version__ = "1.0.0"
