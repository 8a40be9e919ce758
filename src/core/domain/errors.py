"""
Errors — Виды отказов ledger

Все ошибки синхронно возвращаются вызывающей стороне и не оставляют
частичных изменений состояния. Retry — ответственность вызывающего.

reason — машиночитаемый код (совпадает с block_reason в gatekeeper),
message — человекочитаемое описание.
"""


class LedgerError(Exception):
    """Базовый класс отказов ledger."""

    reason: str = "ledger_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.reason}: {self.message}"


# =============================================================================
# ОТКАЗЫ SERIES REGISTRY / MINT ENGINE
# =============================================================================


class Unauthorized(LedgerError):
    """Вызывающий не обладает ролью, необходимой для операции."""

    reason = "unauthorized"


class MetadataNotSet(LedgerError):
    """Mint в series с пустым metadata pointer."""

    reason = "metadata_not_set"


class SeriesExhausted(LedgerError):
    """Mint в series, достигшую лимита supply."""

    reason = "series_exhausted"


class InsufficientPayment(LedgerError):
    """Оплата ниже текущей цены bonding curve."""

    reason = "insufficient_payment"

    def __init__(self, message: str, required: int = 0, provided: int = 0):
        super().__init__(message)
        self.required = required
        self.provided = provided


# =============================================================================
# ОТКАЗЫ OWNERSHIP REGISTRY
# =============================================================================


class ItemNotFound(LedgerError):
    """Item с таким id не существует."""

    reason = "item_not_found"


class ItemAlreadyMinted(LedgerError):
    """Попытка повторно выдать существующий item_id."""

    reason = "item_already_minted"


class NotItemOwner(LedgerError):
    """Transfer инициирован не владельцем item."""

    reason = "not_item_owner"
