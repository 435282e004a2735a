"""
algebra package - Bivectors and rotors of Cl(4,0)
"""

from .bivector import Bivec4, SimpleBivec4, ScalarPlusQuadvec4
from .rotor import Rotor4, RotorLog4, SimpleRotorLog, DoubleRotorLog

__all__ = [
    "Bivec4", "SimpleBivec4", "ScalarPlusQuadvec4",
    "Rotor4", "RotorLog4", "SimpleRotorLog", "DoubleRotorLog",
]
