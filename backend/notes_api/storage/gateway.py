"""Single-outcome access to a callback-style notes table.

`StorageGateway.call` turns `table.<action>(params, callback)` into an
awaitable returning either `Success(value)` or `Failure(error)`, so callers
never deal with the table's callback idiom.
"""
from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional, Union

from notes_api.errors import StorageError
from notes_api.storage.notes_table import NotesTable

logger = logging.getLogger(__name__)

SUPPORTED_ACTIONS = frozenset({"put", "get", "query"})


@dataclass(frozen=True)
class Success:
    value: Any
    ok = True


@dataclass(frozen=True)
class Failure:
    error: StorageError
    ok = False


Result = Union[Success, Failure]


class StorageGateway:
    def __init__(self, table: NotesTable, table_name: str = "notes"):
        self.table = table
        self.table_name = table_name

    async def call(self, action: str, params: dict[str, Any]) -> Result:
        if action not in SUPPORTED_ACTIONS:
            return Failure(StorageError(action, ValueError(f"Unsupported action: {action}")))

        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()
        lock = threading.Lock()
        settled = False

        def _settle(error: Optional[BaseException], data: Any) -> None:
            if not future.done():
                future.set_result((error, data))

        def _callback(error: Optional[BaseException], data: Any) -> None:
            nonlocal settled
            with lock:
                if settled:
                    logger.warning("Ignoring repeated %s callback", action)
                    return
                settled = True
            loop.call_soon_threadsafe(_settle, error, data)

        try:
            getattr(self.table, action)(params, _callback)
        except Exception as exc:
            _callback(exc, None)

        error, data = await future
        if error is not None:
            return Failure(StorageError(action, error))
        return Success(data)

    def close(self) -> None:
        self.table.close()
