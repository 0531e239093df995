from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from book_api.database import Base


class Book(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, name={self.name!r})"
