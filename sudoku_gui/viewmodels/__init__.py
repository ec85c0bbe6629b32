"""View models binding the Tk views to the grid and the solve lifecycle.

They depend on domain types only and expose text rows, status strings, and
command callbacks to ``sudoku_gui/app/main.py``.
"""
