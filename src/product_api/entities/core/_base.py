from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with a store-assigned integer identifier."""

    id: int | None = PydanticField(
        default=None,
        ge=0,
        description="Unique identifier assigned by the store",
    )

    created_at: str | None = PydanticField(default=None)
    updated_at: str | None = PydanticField(default=None)


class EntityTable(SQLModel, table=False):
    """Base table class with an auto-increment integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier assigned by the store",
    )

    created_at: str | None = Field(default=None)
    updated_at: str | None = Field(default=None)
