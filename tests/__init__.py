"""
Test suite for bignumber

Contains:
- tests/unit/          : Unit tests for word primitives, long division,
                         BigNumber, the report driver and JSON contracts
"""
