from __future__ import annotations

import copy
from typing import Any

from notes_api.storage.notes_table import Callback


class InMemoryNotesTable:
    """Process-local table with the same callback contract as FileNotesTable.

    Every call is recorded in `calls` as `(action, params)`.
    """

    def __init__(self) -> None:
        self.items: dict[tuple[str, str, str], dict[str, Any]] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def put(self, params: dict[str, Any], callback: Callback) -> None:
        self.calls.append(("put", params))
        try:
            item = copy.deepcopy(params["Item"])
            self.items[(params["TableName"], item["userId"], item["noteId"])] = item
        except (KeyError, TypeError) as exc:
            callback(exc, None)
            return
        callback(None, {})

    def get(self, params: dict[str, Any], callback: Callback) -> None:
        self.calls.append(("get", params))
        try:
            key = params["Key"]
            item = self.items.get((params["TableName"], key["userId"], key["noteId"]))
        except (KeyError, TypeError) as exc:
            callback(exc, None)
            return
        callback(None, {"Item": copy.deepcopy(item)})

    def query(self, params: dict[str, Any], callback: Callback) -> None:
        self.calls.append(("query", params))
        try:
            table, user_id = params["TableName"], params["Key"]["userId"]
        except (KeyError, TypeError) as exc:
            callback(exc, None)
            return
        items = [
            copy.deepcopy(item)
            for (t, u, _), item in sorted(self.items.items(), key=lambda kv: kv[0][2])
            if t == table and u == user_id
        ]
        callback(None, {"Items": items})

    def close(self) -> None:
        pass

    def count(self, action: str) -> int:
        return sum(1 for a, _ in self.calls if a == action)
