"""
Controllers for Circuit Lab.

This package contains UI-free controller classes that orchestrate
operations between models and views using an observer pattern.
"""

from .circuit_controller import CircuitController
from .file_controller import load_circuit, save_circuit, validate_circuit_data

__all__ = [
    "CircuitController",
    "load_circuit",
    "save_circuit",
    "validate_circuit_data",
]
