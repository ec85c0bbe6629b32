"""Solve workflow: one blocking solve call plus the request state machine.

Nothing here does transport I/O; adapters are reached through domain ports.
"""
