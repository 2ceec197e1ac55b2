from fastapi import APIRouter, Depends, Query, Response, status
from app.config import settings
from app.domain.dtos import BookIn, BookUpdateIn
from app.domain.errors import NotFoundError
from app.domain.models import Book
from app.services.books import BookService
from app.services.listing import paginate, sort_books
from app.singletons import get_book_service

router = APIRouter(prefix="/v1/books", tags=["books"])

@router.get("", response_model=list[Book])
def list_books(
    sort_by: str = Query("title", description="'title' or 'published-year', case-insensitive"),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    svc: BookService = Depends(get_book_service),
):
    books = sort_books(svc.list_all(), sort_by)
    return paginate(books, page, page_size or settings.default_page_size)

@router.get("/{book_id}", response_model=Book)
def get_book(book_id: int, svc: BookService = Depends(get_book_service)):
    book = svc.get_by_id(book_id)
    if book is None:
        raise NotFoundError("Book")
    return book

@router.post("", status_code=status.HTTP_201_CREATED, response_model=Book)
def create_book(body: BookIn, response: Response, svc: BookService = Depends(get_book_service)):
    book = svc.create(body)
    response.headers["Location"] = router.url_path_for("get_book", book_id=str(book.id))
    return book

@router.put("/{book_id}", response_model=Book)
def update_book(book_id: int, body: BookUpdateIn, svc: BookService = Depends(get_book_service)):
    book = svc.update(book_id, body)
    if book is None:
        raise NotFoundError("Book")
    return book

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, svc: BookService = Depends(get_book_service)):
    if not svc.delete(book_id):
        raise NotFoundError("Book")
