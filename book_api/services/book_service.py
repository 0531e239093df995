"""
Book service — CRUD operations for the Book entity.

Each write performs at most one lookup followed by one write and commits
it before returning, so a response is only sent once the change is
durable.  A missing record is a normal outcome and is reported through the
return value, never by raising.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from book_api.models import Book
from book_api.schemas import BookIn

logger = logging.getLogger(__name__)


async def list_books(db: AsyncSession) -> list[Book]:
    """Return every stored book in insertion (id) order."""
    result = await db.execute(select(Book).order_by(Book.id))
    return list(result.scalars().all())


async def get_book(db: AsyncSession, book_id: int) -> Book | None:
    book = await db.get(Book, book_id)
    if book is None:
        logger.debug("Book %s not found", book_id)
    return book


async def create_book(db: AsyncSession, data: BookIn) -> Book:
    """
    Persist a new book and return it with its database-assigned id.
    """
    book = Book(name=data.name)
    db.add(book)
    await db.commit()
    logger.info("Created book %s", book.id)
    return book


async def update_book(db: AsyncSession, book_id: int, data: BookIn) -> bool:
    """
    Overwrite the name of *book_id*.

    Returns False, without writing anything, when the book does not exist.
    Concurrent updates of the same book are last-write-wins.
    """
    book = await get_book(db, book_id)
    if book is None:
        return False

    book.name = data.name
    await db.commit()
    logger.info("Updated book %s", book_id)
    return True


async def delete_book(db: AsyncSession, book_id: int) -> bool:
    """Remove *book_id*.  Returns False when there was nothing to delete."""
    book = await get_book(db, book_id)
    if book is None:
        return False

    await db.delete(book)
    await db.commit()
    logger.info("Deleted book %s", book_id)
    return True
