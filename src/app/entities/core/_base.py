from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with a store-assigned integer identifier.

    ``id`` stays ``None`` until the entity has been persisted.
    """

    id: int | None = PydanticField(
        default=None,
        description="Unique identifier assigned by the data store",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with an auto-increment integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the entity",
    )
