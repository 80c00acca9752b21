import atexit
import copy
import json
import os
import threading

from carhub.config import Config
from carhub.exceptions import StoreError
from carhub.logging_config import get_logger

logger = get_logger(__name__)


class Store:
    """
    Process-wide key-value store of JSON-serializable documents
    (e.g. "bookings", "adminCars", "adminUsers"), persisted to one JSON file.
    """
    _inst = None
    _inst_lock = threading.Lock()
    _atexit_registered = False

    def __init__(self, path: str | os.PathLike | None = None):
        self.path = str(path or Config.DATA_PATH)
        self.docs: dict[str, object] = {}
        self._rw = threading.RLock()

        logger.info("Using store file: %s", self.path)
        self._load()

        # Automatically save on exit (skipped in test environments)
        if not Store._atexit_registered and os.getenv("APP_ENV") != "test":
            atexit.register(self.save)
            Store._atexit_registered = True

    # ---------- Singleton ----------
    @classmethod
    def instance(cls, path: str | os.PathLike | None = None):
        """
        Return the global singleton instance of Store.
        The first path wins; asking for a different path later logs a warning.
        """
        with cls._inst_lock:
            if cls._inst is None:
                cls._inst = Store(path)
            elif path is not None and os.path.abspath(str(path)) != os.path.abspath(cls._inst.path):
                logger.warning("Store already open at %s; ignoring requested path %s",
                               cls._inst.path, path)
        return cls._inst

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next instance() call reloads from disk."""
        with cls._inst_lock:
            cls._inst = None

    # ---------- Persistence ----------
    def _load(self):
        """Load documents from the JSON file, or start empty if unavailable or invalid."""
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Load failed (%s); starting empty.", e)
            self._backup()
            return

        if isinstance(data, dict):
            self.docs = data
            logger.info("Loaded %d document(s): %s", len(self.docs), ", ".join(sorted(self.docs)))
        else:
            logger.warning("Incompatible store (%s); starting empty.", type(data).__name__)
            self._backup()

    def _backup(self):
        """Move an unreadable store file aside so it is not overwritten."""
        bak = self.path + ".bak"
        try:
            os.replace(self.path, bak)
            logger.warning("Backed up unreadable store to %s", bak)
        except OSError as e:
            logger.error("Backup failed: %s", e)

    def _dump(self):
        """Write the documents to the JSON file safely (atomic replace)."""
        directory = os.path.dirname(self.path)
        tmp = self.path + ".tmp"
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(self.docs, f, indent=2, default=str)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as e:
            raise StoreError(f"Error: could not save store to {self.path} ({e})") from e

    def save(self):
        """Thread-safe save method."""
        with self._rw:
            logger.info("Saving to %s ...", self.path)
            self._dump()

    # ---------- Documents ----------
    def get(self, key: str, default=None):
        """Return a deep copy of the document stored under `key`."""
        with self._rw:
            if key not in self.docs:
                return default
            return copy.deepcopy(self.docs[key])

    def put(self, key: str, value) -> None:
        """Store `value` under `key` and persist."""
        with self._rw:
            self.docs[key] = copy.deepcopy(value)
            self._dump()

    def delete(self, key: str) -> bool:
        """Delete a document by key."""
        with self._rw:
            if key in self.docs:
                del self.docs[key]
                self._dump()
                return True
            return False

    def clear(self) -> None:
        """Remove every document (does not persist until save())."""
        with self._rw:
            self.docs.clear()

    def keys(self) -> list[str]:
        with self._rw:
            return sorted(self.docs)
