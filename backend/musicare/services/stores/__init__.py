"""Backends the repositories persist through."""
from musicare.services.stores.base import FileStore, PersonStore
from musicare.services.stores.mock_store import MockStore
from musicare.services.stores.sql_store import SqlFileStore, SqlPersonStore

__all__ = ["FileStore", "PersonStore", "MockStore", "SqlFileStore", "SqlPersonStore"]
