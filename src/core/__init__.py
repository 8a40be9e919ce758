"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the ledger that are
independent of ownership storage and fee settlement.
"""
