# keypub/store.py

import asyncio
from typing import Optional

from fastapi import Request
from pydantic import BaseModel
from tortoise.exceptions import BaseORMException, IntegrityError

from .database import PubKey


class KeyRecord(BaseModel):
    id: str
    public_key: str
    note: Optional[str] = None


class StoreError(Exception):
    """The database could not complete a request.

    ``detail`` keeps the underlying exception for the logs, it is never
    sent to clients.
    """

    def __init__(self, message: str, detail: Optional[BaseException] = None):
        super().__init__(message)
        self.detail = detail


class StoreConflict(StoreError):
    pass


class StoreUnavailable(StoreError):
    pass


class KeyStore:
    """Append-only access to the ``pub_keys`` table.

    The SQLite client behind Tortoise runs every query over one connection.
    Inserts additionally go through ``_write_lock`` so that concurrent
    publishes are applied one at a time, lookups never wait on it.
    """

    def __init__(self):
        self._write_lock = asyncio.Lock()

    async def create(self, record: KeyRecord) -> None:
        async with self._write_lock:
            try:
                await PubKey.create(
                    id=record.id,
                    public_key=record.public_key,
                    note=record.note,
                )
            except IntegrityError as e:
                raise StoreConflict(f"record {record.id} already exists", e) from e
            except BaseORMException as e:
                raise StoreUnavailable("could not store record", e) from e

    async def get(self, record_id: str) -> Optional[KeyRecord]:
        try:
            row = await PubKey.filter(id=record_id).first()
        except BaseORMException as e:
            raise StoreUnavailable("could not load record", e) from e
        if row is None:
            return None
        return KeyRecord(id=row.id, public_key=row.public_key, note=row.note)


# --- Dependency for handing the store built at startup to the routes ---
def get_store(request: Request) -> KeyStore:
    return request.app.state.store
