"""
Line-oriented C/C++ scanner for energy-inefficient and unsafe constructs.
"""

from .issue import Issue, Severity
from .main_checker import EnergyChecker, scan

__all__ = ["EnergyChecker", "Issue", "Severity", "scan"]
