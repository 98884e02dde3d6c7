"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
document store access and the collection each repository owns.
"""

from typing import TypeVar, Generic

from .store import IDocumentStore


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for data access:
    - Document store access via self._store
    - The owned collection name via self.collection
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[User]):
            collection = "users"

            def get_by_id(self, user_id: str) -> Optional[User]:
                data = self._store.find_one(self.collection, {"id": user_id})
                return self._map_to_user(data) if data else None
    """

    collection: str = ""

    def __init__(self, store: IDocumentStore) -> None:
        """
        Initialize the repository with a document store.

        Args:
            store: Document store instance for data operations.
        """
        self._store = store
