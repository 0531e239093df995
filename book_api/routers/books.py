from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from book_api.database import get_db
from book_api.schemas import BookIn, BookResponse
from book_api.services import book_service

router = APIRouter(prefix="/books", tags=["books"])

# Ids are PostgreSQL INTEGER primary keys.
BookId = Annotated[int, Path(ge=1, le=2**31 - 1)]

@router.get("", response_model=list[BookResponse])
async def list_books(db: AsyncSession = Depends(get_db)):
    return await book_service.list_books(db)

@router.get(
    "/{book_id}",
    response_model=BookResponse,
    responses={404: {"description": "Book not found"}},
)
async def get_book(book_id: BookId, db: AsyncSession = Depends(get_db)):
    book = await book_service.get_book(db, book_id)
    if book is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return book

@router.post("", status_code=status.HTTP_201_CREATED, response_model=BookResponse)
async def create_book(data: BookIn, response: Response, db: AsyncSession = Depends(get_db)):
    book = await book_service.create_book(db, data)
    response.headers["Location"] = f"{router.prefix}/{book.id}"
    return book

@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Book not found"}},
)
async def update_book(book_id: BookId, data: BookIn, db: AsyncSession = Depends(get_db)):
    if not await book_service.update_book(db, book_id, data):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Book not found"}},
)
async def delete_book(book_id: BookId, db: AsyncSession = Depends(get_db)):
    if not await book_service.delete_book(db, book_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
