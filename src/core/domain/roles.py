"""
Roles — Три identity, фиксированные при создании ledger

- owner: административная роль (после создания не используется)
- metadata_setter: единственная identity, которой разрешён set_metadata
- fee_recipient: получатель оплаты за mint (pass-through collaborator)

Identity могут совпадать.
"""

from pydantic import BaseModel, Field


class Roles(BaseModel):
    """Immutable набор ролей ledger."""

    owner: str = Field(..., min_length=1, description="Административная identity")
    metadata_setter: str = Field(
        ..., min_length=1, description="Identity, которой разрешён set_metadata"
    )
    fee_recipient: str = Field(..., min_length=1, description="Получатель оплаты за mint")

    model_config = {"frozen": True}
