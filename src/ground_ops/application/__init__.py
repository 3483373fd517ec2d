"""
Application layer for the ground operations engine.

Provides the public facade hosts use to run the desk: it wires the
stateless services to a clock, an id source and host-side storage.
"""

from src.ground_ops.application.ground_operations import GroundOperations

__all__ = ["GroundOperations"]
