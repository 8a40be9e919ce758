"""
Test suite for series-mint-ledger

Contains:
- tests/unit/          : Unit tests for individual modules and ledger scenarios
"""
