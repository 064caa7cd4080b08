"""Todo item schema."""

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """A single todo item. Serialized with camelCase timestamp keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    status: str
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")

    def to_json(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
