"""
Port interfaces for the ground operations engine.

Ports define the abstract collaborators (Protocols) the services depend
on. Adapters in src.ground_ops.adapters provide the production versions.
"""

from src.ground_ops.ports.clock import Clock, IdGenerator

__all__ = [
    "Clock",
    "IdGenerator",
]
