"""
Template Catalog

Maps template family keys ("X/事後抽選", ...) to their four template documents.
The family list lives in templates/catalog.yaml; template bodies are Markdown
files next to it, loaded through a jinja2 FileSystemLoader and cached. Template
sources are used verbatim and never rendered by jinja: the bracket tokens are
resolved by the generators.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Dict, List, Tuple

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, TemplateNotFound
from omegaconf import OmegaConf

from herald.contexts.templating.exceptions import TemplateCatalogError
from herald.contexts.templating.families import CampaignMode, Platform, TemplateFamily
from herald.contexts.templating.logger import _log_debug, _log_warning

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("HERALD_TEMPLATES_PATH", Path(__file__).parent / "templates"))
CATALOG_FILE = "catalog.yaml"


class DocumentKind(Enum):
    """The four documents generated per campaign."""

    GUIDELINES = "guidelines"
    NOTIFICATION = "notification"
    FORM = "form"
    ENCLOSED_LETTER = "enclosed_letter"


class TemplateCatalog:
    """
    Registry for loading and caching campaign templates by family and document kind.

    catalog.yaml layout:
        default_family: X/事後抽選
        families:
          X/事後抽選:
            platform: X
            mode: 事後抽選
            templates:
              guidelines: guidelines/x_draw.md
              notification: notification/default.md
              form: form/default.md
              enclosed_letter: enclosed_letter/x.md
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the catalog.

        Args:
            templates_path: Directory holding catalog.yaml and the template
                files. Defaults to HERALD_TEMPLATES_PATH from environment, or the
                packaged templates directory.

        Raises:
            TemplateCatalogError: If catalog.yaml is missing or malformed
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self.catalog_path = self.templates_path / CATALOG_FILE
        self._cache: Dict[str, str] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path), encoding="utf-8"),
            keep_trailing_newline=True,
        )

        self._families, self._template_files, self.default_family = self._load_catalog()

    def _load_catalog(self) -> Tuple[Dict[str, TemplateFamily], Dict[str, Dict[DocumentKind, str]], TemplateFamily]:
        if not self.catalog_path.exists():
            raise TemplateCatalogError("Catalog config not found", self.catalog_path)

        config = OmegaConf.to_container(OmegaConf.load(self.catalog_path), resolve=True)
        entries = (config or {}).get("families")
        if not entries:
            raise TemplateCatalogError("Catalog defines no 'families'", self.catalog_path)

        families: Dict[str, TemplateFamily] = {}
        template_files: Dict[str, Dict[DocumentKind, str]] = {}

        for key, entry in entries.items():
            entry = entry or {}
            try:
                platform = Platform(entry["platform"])
                mode = CampaignMode(entry.get("mode", CampaignMode.DRAW.value))
            except (KeyError, ValueError) as e:
                raise TemplateCatalogError(f"Invalid platform or mode: {e}", self.catalog_path, key) from e

            templates = entry.get("templates") or {}
            missing = [kind.value for kind in DocumentKind if kind.value not in templates]
            if missing:
                raise TemplateCatalogError(
                    f"Missing templates for: {', '.join(missing)}", self.catalog_path, key
                )

            families[key] = TemplateFamily(key=key, platform=platform, mode=mode)
            template_files[key] = {kind: templates[kind.value] for kind in DocumentKind}

        default_key = config.get("default_family")
        if default_key not in families:
            raise TemplateCatalogError(
                f"default_family '{default_key}' is not a catalog family", self.catalog_path
            )

        return families, template_files, families[default_key]

    def families(self) -> List[TemplateFamily]:
        """All catalog families, in catalog order."""
        return list(self._families.values())

    def resolve_family(self, key: str = None) -> TemplateFamily:
        """
        Look up a family by key, falling back to the default family.

        An empty or unknown key is not an error: the default family is used
        and a warning is logged.
        """
        if key in self._families:
            return self._families[key]

        if key:
            _log_warning(f"Unknown template family '{key}', using {self.default_family.key}")
        return self.default_family

    def get_platform(self, key: str = None) -> Platform:
        """Platform of the family for key (default family if unknown)."""
        return self.resolve_family(key).platform

    def get_template_name(self, family: TemplateFamily, kind: DocumentKind) -> str:
        """Template file name, relative to templates_path."""
        return self._template_files[self.resolve_family(family.key).key][kind]

    def get_template_path(self, family: TemplateFamily, kind: DocumentKind) -> Path:
        """Absolute path of a family's template file."""
        return self.templates_path / self.get_template_name(family, kind)

    def get_template(self, family: TemplateFamily, kind: DocumentKind) -> str:
        """
        Get a template source, loading and caching it if necessary.

        Args:
            family: Template family
            kind: Document kind

        Returns:
            Raw template text (human-readable tokens, Markdown markers)

        Raises:
            TemplateNotFound: If the template file doesn't exist
        """
        name = self.get_template_name(family, kind)

        if name in self._cache:
            return self._cache[name]

        try:
            source, _, _ = self.env.loader.get_source(self.env, name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for {family.key} {kind.value} at {self.templates_path / name}"
            ) from e

        _log_debug(f"Loaded template {name}")
        self._cache[name] = source
        return source

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """
        Check if a template file is in the cache.

        Args:
            name: Template file name relative to templates_path
        """
        return name in self._cache
