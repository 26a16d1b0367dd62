"""Paper repository - the generic repository bound to the papers collection."""

from catalog.domain.errors import PaperNotFoundError
from catalog.domain.models import Paper
from catalog.domain.value_objects import IdGenerator
from catalog.schemas import PaperFieldsSerializer
from catalog.services.repository import EntityRepository
from catalog.stores.codecs import PaperCollectionCodec
from catalog.stores.interfaces import BlobStore

PAPERS_COLLECTION = "papers"


class PaperRepository(EntityRepository[Paper]):
    """Papers have no relations and no cascade; plain collection CRUD."""

    def __init__(self, store: BlobStore, ids: IdGenerator | None = None) -> None:
        super().__init__(
            store,
            codec=PaperCollectionCodec(PAPERS_COLLECTION),
            schema=PaperFieldsSerializer,
            factory=Paper,
            not_found=PaperNotFoundError,
            ids=ids,
        )
