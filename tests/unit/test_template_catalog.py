"""Unit tests for TemplateCatalog class."""

import pytest
from pathlib import Path
from jinja2 import TemplateNotFound

from herald.contexts.templating.catalog import DocumentKind, TemplateCatalog
from herald.contexts.templating.exceptions import TemplateCatalogError
from herald.contexts.templating.families import (
    STRATEGIES,
    CampaignMode,
    FamilyStrategy,
    Platform,
    get_strategy,
)


def write_catalog(base: Path, catalog: str, files=()):
    """Write catalog.yaml and empty-ish template files into base."""
    (base / "catalog.yaml").write_text(catalog, encoding="utf-8")
    for name in files:
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"# {name}\n[キャンペーン名]\n", encoding="utf-8")


MINIMAL_CATALOG = """
default_family: A/事後抽選
families:
  A/事後抽選:
    platform: X
    templates:
      guidelines: g.md
      notification: n.md
      form: f.md
      enclosed_letter: missing.md
"""


@pytest.mark.unit
def test_catalog_init():
    """Packaged catalog loads with its five families."""
    catalog = TemplateCatalog()
    assert catalog.templates_path.exists()
    assert catalog._cache == {}
    assert len(catalog.families()) == 5
    assert catalog.default_family.key == "X/事後抽選"


@pytest.mark.unit
def test_catalog_family_details():
    catalog = TemplateCatalog()
    family = catalog.resolve_family("X/即時")
    assert family.platform is Platform.X
    assert family.mode is CampaignMode.INSTANT
    assert catalog.get_platform("IG・X/事後抽選") is Platform.IG_X


@pytest.mark.unit
def test_packaged_families_have_strategies():
    """Every packaged family gets its own strategy, keyed like the catalog."""
    catalog = TemplateCatalog()
    for family in catalog.families():
        strategy = get_strategy(family)
        assert type(strategy) is not FamilyStrategy, family.key
        assert STRATEGIES[family.key] is strategy


@pytest.mark.unit
@pytest.mark.parametrize("key", [None, "", "LINE/事後抽選"])
def test_resolve_family_falls_back_to_default(key):
    catalog = TemplateCatalog()
    assert catalog.resolve_family(key) == catalog.default_family
    assert catalog.get_platform(key) is Platform.X


@pytest.mark.unit
def test_every_packaged_template_loads():
    catalog = TemplateCatalog()
    for family in catalog.families():
        for kind in DocumentKind:
            assert catalog.get_template(family, kind).strip()


@pytest.mark.unit
def test_template_caching():
    """Templates are cached by file name after first load."""
    catalog = TemplateCatalog()
    family = catalog.resolve_family("IG/事後抽選")

    template1 = catalog.get_template(family, DocumentKind.GUIDELINES)
    assert catalog.is_cached("guidelines/ig_draw.md")

    template2 = catalog.get_template(family, DocumentKind.GUIDELINES)
    assert template1 is template2


@pytest.mark.unit
def test_shared_template_cached_once():
    """Families sharing a file share one cache entry."""
    catalog = TemplateCatalog()
    for family in catalog.families():
        catalog.get_template(family, DocumentKind.FORM)
    assert list(catalog._cache) == ["form/default.md"]


@pytest.mark.unit
def test_clear_cache():
    catalog = TemplateCatalog()
    catalog.get_template(catalog.default_family, DocumentKind.NOTIFICATION)
    assert len(catalog._cache) == 1

    catalog.clear_cache()
    assert len(catalog._cache) == 0


@pytest.mark.unit
def test_get_template_path():
    catalog = TemplateCatalog()
    path = catalog.get_template_path(catalog.default_family, DocumentKind.ENCLOSED_LETTER)

    assert isinstance(path, Path)
    assert path.name == "x.md"
    assert path.exists()


@pytest.mark.unit
def test_get_template_not_found(tmp_path):
    write_catalog(tmp_path, MINIMAL_CATALOG, files=("g.md", "n.md", "f.md"))
    catalog = TemplateCatalog(tmp_path)

    assert catalog.get_template(catalog.default_family, DocumentKind.GUIDELINES).startswith("# g.md")
    with pytest.raises(TemplateNotFound):
        catalog.get_template(catalog.default_family, DocumentKind.ENCLOSED_LETTER)


@pytest.mark.unit
def test_missing_catalog(tmp_path):
    with pytest.raises(TemplateCatalogError, match="not found"):
        TemplateCatalog(tmp_path)


@pytest.mark.unit
def test_catalog_without_families(tmp_path):
    write_catalog(tmp_path, "default_family: A\n")
    with pytest.raises(TemplateCatalogError, match="families"):
        TemplateCatalog(tmp_path)


@pytest.mark.unit
def test_catalog_with_invalid_platform(tmp_path):
    write_catalog(tmp_path, MINIMAL_CATALOG.replace("platform: X", "platform: LINE"))
    with pytest.raises(TemplateCatalogError) as exc_info:
        TemplateCatalog(tmp_path)
    assert exc_info.value.family_key == "A/事後抽選"


@pytest.mark.unit
def test_catalog_with_missing_document_kind(tmp_path):
    write_catalog(tmp_path, MINIMAL_CATALOG.replace("      form: f.md\n", ""))
    with pytest.raises(TemplateCatalogError, match="form"):
        TemplateCatalog(tmp_path)


@pytest.mark.unit
def test_catalog_with_unknown_default(tmp_path):
    write_catalog(tmp_path, MINIMAL_CATALOG.replace("default_family: A/事後抽選", "default_family: B"))
    with pytest.raises(TemplateCatalogError, match="default_family"):
        TemplateCatalog(tmp_path)


@pytest.mark.unit
def test_catalog_error_message():
    error = TemplateCatalogError("Bad entry", Path("catalog.yaml"), "X/事後抽選")
    assert str(error) == "Bad entry\nFamily: X/事後抽選\nCatalog: catalog.yaml"
