"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the calculator. It
performs no I/O and is independent of the interactive driver.
"""
