"""Gates — индивидуальные гейты Gatekeeper системы.

- GATE 0: Role Guard (access control для ограниченных операций)
- GATE 1: Metadata Set
- GATE 2: Series Supply
- GATE 3: Payment (bonding curve)
"""

from .gate_00_role_guard import Gate00RoleGuard, Gate00Result
from .gate_01_metadata_set import Gate01MetadataSet, Gate01Result
from .gate_02_series_supply import Gate02SeriesSupply, Gate02Result
from .gate_03_payment import Gate03Payment, Gate03Result, Gate03Config

__all__ = [
    "Gate00RoleGuard",
    "Gate00Result",
    "Gate01MetadataSet",
    "Gate01Result",
    "Gate02SeriesSupply",
    "Gate02Result",
    "Gate03Payment",
    "Gate03Result",
    "Gate03Config",
]
