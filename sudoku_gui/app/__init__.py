"""Application composition layer for the Tkinter GUI.

The app wires views, view models, the solver adapter, and use cases into a
runnable desktop workflow without placing business logic in views.
"""
