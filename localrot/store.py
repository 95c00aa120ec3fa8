"""
Record Store - whole-collection JSON snapshots on disk

Each collection (users, reservations, payments) lives in its own JSON file
holding a single array. Reads load the whole array; every mutation rewrites
the whole file. Writes are serialized per collection with a lock and land
through a temp file + os.replace so a crash never leaves a torn file.
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import ExitStack, contextmanager
from typing import Dict, Iterator, List

from flask import current_app

logger = logging.getLogger(__name__)

USERS = 'users'
RESERVATIONS = 'reservations'
PAYMENTS = 'payments'

COLLECTIONS = (USERS, RESERVATIONS, PAYMENTS)

EXTENSION_KEY = 'record_store'


class StoreClosedError(RuntimeError):
    """Raised when a closed store is used"""


class RecordStore:
    """JSON file store with one lock per collection"""

    def __init__(self, data_dir: str, collections=COLLECTIONS):
        self.data_dir = data_dir
        self.collections = tuple(collections)
        self._locks = {name: threading.RLock() for name in self.collections}
        self._opened = False

    def __repr__(self):
        return f'<RecordStore {self.data_dir}>'

    @property
    def is_open(self) -> bool:
        return self._opened

    def path_for(self, collection: str) -> str:
        if collection not in self._locks:
            raise KeyError(f"Unknown collection: {collection}")
        return os.path.join(self.data_dir, f'{collection}.json')

    def open(self):
        """Create the data directory and any missing collection files"""
        os.makedirs(self.data_dir, exist_ok=True)
        for name in self.collections:
            path = self.path_for(name)
            if not os.path.exists(path):
                self._write(name, [])
                logger.info(f"Initialized empty collection file {path}")
        self._opened = True
        logger.info(f"Record store opened at {self.data_dir}")
        return self

    def close(self):
        self._opened = False
        logger.info(f"Record store closed at {self.data_dir}")

    def _ensure_open(self):
        if not self._opened:
            raise StoreClosedError(f"Record store at {self.data_dir} is not open")

    def read(self, collection: str) -> List[Dict]:
        """Return a fresh snapshot of a collection"""
        self._ensure_open()
        with self._locks[collection]:
            with open(self.path_for(collection), 'r', encoding='utf-8') as fh:
                return json.load(fh)

    def replace(self, collection: str, records: List[Dict]):
        """Overwrite a collection with the given snapshot"""
        self._ensure_open()
        with self._locks[collection]:
            self._write(collection, records)

    @contextmanager
    def update(self, collection: str) -> Iterator[List[Dict]]:
        """
        Read-modify-write a collection under its lock.

        The yielded list is written back when the block exits without error.
        Nested updates on different collections must always be taken in the
        same order (payments before reservations).
        """
        self._ensure_open()
        with self._locks[collection]:
            records = self.read(collection)
            yield records
            self._write(collection, records)

    @contextmanager
    def locked(self, *collections: str):
        """Hold the locks of several collections, acquired in the given order"""
        self._ensure_open()
        with ExitStack() as stack:
            for name in collections:
                stack.enter_context(self._locks[name])
            yield self

    def count(self, collection: str) -> int:
        return len(self.read(collection))

    def _write(self, collection: str, records: List[Dict]):
        path = self.path_for(collection)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f'.{collection}.', suffix='.tmp', dir=self.data_dir
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                json.dump(records, fh, indent=2)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


def init_store(app) -> RecordStore:
    """Open the record store for the Flask app and attach it as an extension"""
    data_dir = app.config.get('DATA_DIR')
    if not data_dir:
        raise RuntimeError("DATA_DIR is not configured")

    store = RecordStore(data_dir).open()
    app.extensions[EXTENSION_KEY] = store
    return store


def get_store() -> RecordStore:
    """Record store bound to the current app"""
    return current_app.extensions[EXTENSION_KEY]
