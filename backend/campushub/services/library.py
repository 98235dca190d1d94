from campushub.schemas.common import EntityType
from campushub.schemas.library import Book, BookCreate
from campushub.services.entity_manager import EntityDefinition

BOOK_DEFINITION = EntityDefinition(
    entity_type=EntityType.BOOKS,
    label="Book",
    id_prefix="BK",
    form_model=BookCreate,
    record_model=Book,
    sort_key=lambda book: book.title.lower(),
)
