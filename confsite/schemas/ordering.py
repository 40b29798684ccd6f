"""Pydantic schemas shared by all ordered collections."""

from uuid import UUID

from pydantic import BaseModel, Field, model_validator


class PositionUpdate(BaseModel):
    """Schema for a single item in a reorder request."""

    id: UUID
    position: int = Field(..., ge=0)


class ReorderRequest(BaseModel):
    """Full ordered list of a collection with its new positions."""

    items: list[PositionUpdate]

    @model_validator(mode="after")
    def check_order(self) -> "ReorderRequest":
        """Reject duplicate ids and positions that do not strictly increase."""
        ids = [item.id for item in self.items]
        if len(set(ids)) != len(ids):
            raise ValueError("Each item may appear only once")
        positions = [item.position for item in self.items]
        if any(b <= a for a, b in zip(positions, positions[1:])):
            raise ValueError("Positions must strictly increase in list order")
        return self


class MoveRequest(BaseModel):
    """Move one item from an index to another within the current order."""

    from_index: int = Field(..., ge=0)
    to_index: int = Field(..., ge=0)
