"""GATE 3: Payment

Проверяет оплату против bonding curve:
- required_price = price(total_minted) — глобальный, не per-series счётчик
- payment_amount >= required_price, иначе insufficient_payment
- Переплата принимается без возврата (overpayment фиксируется в результате)

Интеграция:
- Использует результат GATE 2 (должен быть PASS)
"""

from dataclasses import dataclass

from src.core.math.bonding_curve import UNIT_INCREMENT, price
from src.gatekeeper.gates.gate_02_series_supply import Gate02Result


@dataclass(frozen=True)
class Gate03Result:
    """Результат GATE 3."""

    allowed: bool
    block_reason: str

    # Payment metrics (base units)
    total_minted: int
    required_price: int
    payment_amount: int
    overpayment: int

    # Детали
    details: str


@dataclass(frozen=True)
class Gate03Config:
    """Конфигурация GATE 3."""

    # Шаг цены в base units
    unit_increment: int = UNIT_INCREMENT


class Gate03Payment:
    """GATE 3: оплата не ниже цены bonding curve."""

    def __init__(self, config: Gate03Config | None = None):
        """Инициализация GATE 3.

        Args:
            config: конфигурация gate (опционально, используется default)
        """
        self.config = config or Gate03Config()

    def evaluate(
        self,
        gate02_result: Gate02Result,
        total_minted: int,
        payment_amount: int,
    ) -> Gate03Result:
        """Оценка GATE 3.

        Args:
            gate02_result: результат GATE 2
            total_minted: глобальный счётчик выпуска
            payment_amount: оплата в base units

        Returns:
            Gate03Result с решением о допуске
        """
        required = price(total_minted, self.config.unit_increment)

        # 1. Проверка блокировки GATE 2
        if not gate02_result.allowed:
            return Gate03Result(
                allowed=False,
                block_reason=gate02_result.block_reason,
                total_minted=total_minted,
                required_price=required,
                payment_amount=payment_amount,
                overpayment=0,
                details=f"GATE 2 blocked: {gate02_result.details}",
            )

        # 2. Оплата
        if payment_amount < required:
            return Gate03Result(
                allowed=False,
                block_reason="insufficient_payment",
                total_minted=total_minted,
                required_price=required,
                payment_amount=payment_amount,
                overpayment=0,
                details=f"Not enough payment sent: required={required}, sent={payment_amount}",
            )

        overpayment = payment_amount - required
        return Gate03Result(
            allowed=True,
            block_reason="",
            total_minted=total_minted,
            required_price=required,
            payment_amount=payment_amount,
            overpayment=overpayment,
            details=f"PASS: required={required}, sent={payment_amount}, overpayment={overpayment}",
        )
