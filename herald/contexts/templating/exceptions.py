"""Custom exceptions for the templating context's catalog layer."""

from pathlib import Path
from typing import Optional


class TemplateCatalogError(Exception):
    """
    Exception raised when the template catalog config is malformed.

    The document generators never raise; only loading catalog.yaml can fail.

    Attributes:
        message: Error description
        catalog_path: Path to the catalog config
        family_key: Family entry at fault, if any
    """

    def __init__(
        self,
        message: str,
        catalog_path: Optional[Path] = None,
        family_key: Optional[str] = None,
    ):
        self.message = message
        self.catalog_path = catalog_path
        self.family_key = family_key

        parts = [message]

        if family_key:
            parts.append(f"Family: {family_key}")

        if catalog_path:
            parts.append(f"Catalog: {catalog_path}")

        super().__init__("\n".join(parts))
