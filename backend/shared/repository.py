"""
Base repository class for database access.

Provides a common abstraction layer for the Supabase-backed repositories,
encapsulating client access and the row-mapping helpers they share.
"""

from datetime import date, datetime
from typing import Any, Optional, TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for Supabase repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Date parsing for rows returned by PostgREST

    Subclasses implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class PetRepository(BaseRepository[Pet]):
            def get_by_id(self, pet_id: int) -> Optional[Pet]:
                result = self._db.table("pets").select("*").eq("id", pet_id).execute()
                if not result.data:
                    return None
                return self._map_to_pet(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _parse_date(value: Any) -> Optional[date]:
        """PostgREST returns dates as ISO strings."""
        if value is None or isinstance(value, date):
            return value
        return date.fromisoformat(value)

    @staticmethod
    def _parse_datetime(value: Any) -> Optional[datetime]:
        if value is None or isinstance(value, datetime):
            return value
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
