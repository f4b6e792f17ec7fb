"""
Checkers package for C/C++ energy issues.
"""

from .memory_checker import MemoryChecker
from .stl_checker import STLChecker
from .string_checker import StringChecker
from .loop_nesting_checker import LoopNestingChecker

__all__ = [
    'MemoryChecker',
    'STLChecker',
    'StringChecker',
    'LoopNestingChecker',
]
