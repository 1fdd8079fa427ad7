from .circuit_validator import validate_circuit
from .hit_test import hit_terminal
from .power_propagation import check_powered, find_closed_loop, get_internal_connections

__all__ = ['check_powered', 'find_closed_loop', 'get_internal_connections',
           'hit_terminal', 'validate_circuit']
