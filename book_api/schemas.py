from pydantic import BaseModel, ConfigDict


class BookBase(BaseModel):
    name: str


class BookIn(BookBase):
    """Request body for create and update.  A client-supplied ``id`` is dropped."""


class BookResponse(BookBase):
    id: int
    model_config = ConfigDict(from_attributes=True)
