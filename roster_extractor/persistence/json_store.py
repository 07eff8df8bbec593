"""
JSON file-based storage for extracted documents.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from ..exceptions import DataPersistenceError
from ..models import ExtractedDocument


class JSONStore:
    """
    Stores extracted documents as ``<base_dir>/<name>.json``.

    Files use the same camelCase contract as ``ExtractedDocument.to_dict``.
    """

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def path_for(self, name: str) -> Path:
        return self.base_dir / f"{name}.json"

    def save_document(self, document: ExtractedDocument, name: str) -> Path:
        """
        Save an extracted document.

        Args:
            document: Document to save
            name: File stem, typically the source PDF stem

        Returns:
            Path to saved file
        """
        output_path = self.path_for(name)
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_text(
                json.dumps(document.to_dict(), ensure_ascii=False, indent=2),
                encoding="utf-8"
            )
        except OSError as e:
            raise DataPersistenceError(f"Failed to save document: {e}", str(output_path), "save") from e
        return output_path

    def load_document(self, path: Union[Path, str]) -> ExtractedDocument:
        """Load a document saved by ``save_document``."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return ExtractedDocument.from_dict(data)
        except OSError as e:
            raise DataPersistenceError(f"Failed to read document: {e}", str(path), "load") from e
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise DataPersistenceError(f"Invalid document format: {e}", str(path), "load") from e
