"""
Persistence for form submissions.

The whole collection is read, mutated in memory and written back on every
append. There is no locking: two concurrent appends can both read the same
state and the later write wins.

Stored records are passed through as plain dicts, exactly as they appear in
the backing document. Only new records go through the Submission model.
"""

import os
import json
import logging
from typing import Any, List, Optional

from form_service.schemas import Submission


logger = logging.getLogger(__name__)


class StorageError(Exception):
    pass


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    pass


def last_id(records: List[Any]) -> Optional[int]:
    """
    Id of the last record, if it carries an integer one.
    """

    if not records or not isinstance(records[-1], dict):
        return None

    value = records[-1].get('id')
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    return None


class SubmissionStore:
    """
    Base class for submission storage.

    Subclasses provide _read and _write over the raw list of records;
    load_all and append_one are shared.
    """

    def _read(self) -> Any:
        raise NotImplementedError

    def _write(self, records: List[Any]) -> None:
        raise NotImplementedError

    def load_all(self) -> List[Any]:
        """
        Returns every stored record in insertion order, unchanged.

        Raises StorageReadError if the data cannot be read or decoded,
        or if the document is not a list.
        """

        raw = self._read()
        if not isinstance(raw, list):
            raise StorageReadError(
                f"Expected a list of submissions, got {type(raw).__name__}")

        return raw

    def append_one(self, record: Submission) -> Submission:
        """
        Appends a record and rewrites the whole collection.

        A read failure is logged and the collection is treated as empty,
        so whatever was unreadable gets overwritten. A write failure is
        logged only. Returns the record as stored (its id may be bumped
        above the last stored id).
        """

        try:
            records = self.load_all()
        except StorageReadError as e:
            logger.error("Error reading data, continuing with empty collection: %s", e)
            records = []

        previous_id = last_id(records)
        if previous_id is not None and record.id <= previous_id:
            record = record.model_copy(update={'id': previous_id + 1})

        records.append(record.model_dump())

        try:
            self._write(records)
        except StorageWriteError as e:
            logger.error("Error writing data: %s", e)

        return record


class JsonFileStore(SubmissionStore):
    def __init__(self, path: str):
        self.path = path

    def _read(self) -> Any:
        if not os.path.exists(self.path):
            return []

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise StorageReadError(f"Cannot read {self.path}: {e}") from e

    def _write(self, records: List[Any]) -> None:
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise StorageWriteError(f"Cannot write {self.path}: {e}") from e

    def __repr__(self) -> str:
        return f"JsonFileStore({self.path!r})"


class MemoryStore(SubmissionStore):
    """
    Keeps submissions in process memory. Nothing survives a restart.
    """

    def __init__(self, records: Optional[List[Any]] = None):
        self._records: List[Any] = list(records or [])

    def _read(self) -> Any:
        return list(self._records)

    def _write(self, records: List[Any]) -> None:
        self._records = list(records)
