"""Payroll Department package.

This package is organized by feature modules (payroll, shell) with thin
console/Flask presentation layers over an in-memory work type registry.
"""

__version__ = "0.1.0"
