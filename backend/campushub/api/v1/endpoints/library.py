from fastapi import APIRouter

from campushub.api.v1.endpoints.records import register_crud_routes
from campushub.schemas.common import EntityType
from campushub.schemas.library import Book, BookCreate

router = APIRouter(prefix="/books", tags=["Library"])

register_crud_routes(router, EntityType.BOOKS, BookCreate, Book)
