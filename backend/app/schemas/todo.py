from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class TodoCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: StrictStr
    is_completed: StrictBool = Field(False, alias="isCompleted")


class TodoUpdate(BaseModel):
    """Fields left out of the body are not touched; explicit nulls reach the store."""

    model_config = ConfigDict(populate_by_name=True)

    title: StrictStr | None = None
    is_completed: StrictBool | None = Field(None, alias="isCompleted")


class TodoOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    title: str
    is_completed: bool = Field(alias="isCompleted")
