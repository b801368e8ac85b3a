import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from storefront_client.application.ports.key_value_store import KeyValueStore
from storefront_client.infrastructure.observability.logger_factory_service import build_logger

logger = build_logger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """Key-value store persisted as one JSON object on disk."""

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)
        self.store_dir = self.file_path.parent
        self._ensure_store()

    def _ensure_store(self):
        if not self.store_dir.exists():
            self.store_dir.mkdir(parents=True, exist_ok=True)

        if not self.file_path.exists():
            self._write_json({})

    def _read_json(self) -> Dict[str, str]:
        if not self.file_path.exists():
            return {}
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                content = f.read().strip()
                if not content:
                    return {}
                data = json.loads(content)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to read client storage {self.file_path}: {e}. Returning empty.")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Client storage {self.file_path} is not a JSON object. Returning empty.")
            return {}
        return data

    def _write_json(self, data: Dict[str, str]):
        """
        Atomic write: write to temp file then rename.
        """
        tmp_path = None
        try:
            # Temp file lives in the same directory so the rename stays on one filesystem
            with tempfile.NamedTemporaryFile("w", dir=self.store_dir, delete=False, encoding="utf-8") as tmp:
                json.dump(data, tmp, indent=2)
                tmp_path = tmp.name

            os.replace(tmp_path, self.file_path)

        except OSError as e:
            logger.error(f"Failed to write client storage {self.file_path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get(self, key: str) -> Optional[str]:
        value = self._read_json().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_json()
        data[key] = value
        self._write_json(data)

    def remove(self, key: str) -> None:
        data = self._read_json()
        if key in data:
            del data[key]
            self._write_json(data)
