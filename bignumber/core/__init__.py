"""
Core domain models, mathematical primitives, and invariants.

This module contains the arithmetic engine; it performs no I/O and
is independent of the driver.
"""
