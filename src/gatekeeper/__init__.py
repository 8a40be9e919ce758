"""Gatekeeper — система гейтов для допуска операций ledger.

- GATE 0 охраняет ограниченные операции (set_metadata)
- GATE 1-3 выполняются в фиксированном порядке перед каждым mint
"""

from .gates.gate_00_role_guard import Gate00RoleGuard, Gate00Result
from .mint_gatekeeper import MintGatekeeper, MintGateResult

__all__ = [
    "Gate00RoleGuard",
    "Gate00Result",
    "MintGatekeeper",
    "MintGateResult",
]
