"""Tkinter desktop client for a remote Sudoku solving service."""

__version__ = "0.1.0"
