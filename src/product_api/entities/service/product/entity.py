"""Entity: Product."""

from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from src.product_api.entities.core._base import Entity


class Product(Entity):
    """Product entity representing a catalog item.

    This is the domain model exchanged over HTTP and returned by the
    repository. Absent fields take their zero value.
    """

    name: str = Field(default="", description="Name")
    price: float = Field(default=0.0, allow_inf_nan=False, description="Unit price")
    description: str = Field(default="", description="Free-form description")
    stock_quantity: int = Field(default=0, description="Units in stock")
    is_deleted: bool = Field(default=False, description="Soft-delete flag")

    @field_validator(
        "name", "price", "description", "stock_quantity", "is_deleted", mode="before"
    )
    @classmethod
    def null_keeps_default(cls, value: Any, info: ValidationInfo) -> Any:
        """A null value leaves the field at its zero value."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.price == other.price
            and self.description == other.description
            and self.stock_quantity == other.stock_quantity
            and self.is_deleted == other.is_deleted
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.price,
            self.description,
            self.stock_quantity,
            self.is_deleted,
        ))
