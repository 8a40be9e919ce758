"""GATE 0: Role Guard (access control)

Проверка capability в начале каждой ограниченной операции:
- caller должен совпадать с identity, которой выдана роль
- Роли фиксированы при создании ledger (см. Roles)

Используется Series Registry для set_metadata (роль metadata_setter).
Stateless: не хранит и не изменяет состояние.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Gate00Result:
    """Результат GATE 0."""

    allowed: bool
    block_reason: str

    # Входные параметры для диагностики
    caller: str
    role: str

    # Детали
    details: str


class Gate00RoleGuard:
    """GATE 0: сравнение caller с identity роли."""

    def __init__(self):
        """GATE 0 не требует зависимостей (stateless)."""
        pass

    def evaluate(self, caller: str, role: str, role_holder: str) -> Gate00Result:
        """Оценка GATE 0.

        Args:
            caller: identity вызывающего
            role: имя роли (для диагностики, например 'metadata_setter')
            role_holder: identity, которой выдана роль

        Returns:
            Gate00Result с решением о допуске
        """
        if caller != role_holder:
            return Gate00Result(
                allowed=False,
                block_reason="unauthorized",
                caller=caller,
                role=role,
                details=f"Only {role} can perform this operation, caller={caller}",
            )

        return Gate00Result(
            allowed=True,
            block_reason="",
            caller=caller,
            role=role,
            details=f"PASS: caller holds role {role}",
        )
