"""
Item — Модель выпущенного item

Immutable Pydantic модель: item_id, принадлежность к series и текущий владелец.
series_id и sequence задаются тем, кто выдал item_id (см. identifiers),
модель лишь проверяет их согласованность.
"""

from pydantic import BaseModel, Field, model_validator


class Item(BaseModel):
    """
    Модель item.

    Все изменения владельца (transfer) должны создавать новый экземпляр.
    """

    item_id: int = Field(..., gt=0, description="Глобально уникальный идентификатор")
    series_id: int = Field(..., gt=0, description="Series, в которой выпущен item")
    sequence: int = Field(..., gt=0, description="Порядковый номер внутри series (1-based)")
    owner: str = Field(..., min_length=1, description="Identity владельца")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_sequence_below_id(self) -> "Item":
        if self.sequence > self.item_id:
            raise ValueError(
                f"sequence {self.sequence} cannot exceed item_id {self.item_id}"
            )
        return self

    def with_owner(self, owner: str) -> "Item":
        return Item(
            item_id=self.item_id,
            series_id=self.series_id,
            sequence=self.sequence,
            owner=owner,
        )
