import json

import pytest

from BaselineScanner.Business.FeatureClassifier import FeatureClassifier
from BaselineScanner.Business.ReferenceCatalog import ReferenceCatalog
from BaselineScanner.Exception.ScanErrors import CatalogError
from BaselineScanner.Model.MaturityTier import MaturityTier


def make_catalog(**overrides):
    entries = {
        "newlyAvailable": ["color-mix"],
        "widelyAvailable": ["zzz"],
        "experimental": ["yyy"],
        "stable": ["xxx"],
    }
    entries.update(overrides)
    return ReferenceCatalog(entries)


def test_default_catalog_scenarios():
    classifier = FeatureClassifier(ReferenceCatalog())
    assert classifier.classify(":has()") is MaturityTier.NEWLY_AVAILABLE
    assert classifier.classify("container-type") is MaturityTier.NEWLY_AVAILABLE
    assert classifier.classify("clamp()") is MaturityTier.NEWLY_AVAILABLE
    assert classifier.classify("width") is MaturityTier.WIDELY_AVAILABLE
    assert classifier.classify("@keyframes") is MaturityTier.WIDELY_AVAILABLE
    assert classifier.classify("transform") is MaturityTier.WIDELY_AVAILABLE
    assert classifier.classify("@scope") is MaturityTier.EXPERIMENTAL
    assert classifier.classify("popover") is MaturityTier.EXPERIMENTAL


def test_newly_available_wins_over_stable():
    # "max" (newly) is contained in "max-width", which is also a stable entry
    classifier = FeatureClassifier(ReferenceCatalog())
    assert classifier.classify("max-width") is MaturityTier.NEWLY_AVAILABLE


def test_priority_with_shared_entry():
    classifier = FeatureClassifier(make_catalog(newlyAvailable=["aa"], stable=["aa"]))
    assert classifier.classify("aa") is MaturityTier.NEWLY_AVAILABLE


def test_match_is_bidirectional():
    classifier = FeatureClassifier(make_catalog())
    assert classifier.classify("color-mix()") is MaturityTier.NEWLY_AVAILABLE
    assert classifier.classify("mix") is MaturityTier.NEWLY_AVAILABLE


def test_unknown_token_defaults_to_stable():
    assert FeatureClassifier(make_catalog()).classify("qqq") is MaturityTier.STABLE
    assert FeatureClassifier(ReferenceCatalog()).classify("zoom") is MaturityTier.STABLE


def test_categorize_keeps_input_order():
    classifier = FeatureClassifier(ReferenceCatalog())
    categorized = classifier.categorize(["width", "clamp()", "zoom", "transform", ":has()"])
    assert list(categorized) == list(FeatureClassifier.PRIORITY)
    assert categorized[MaturityTier.NEWLY_AVAILABLE] == ["clamp()", ":has()"]
    assert categorized[MaturityTier.WIDELY_AVAILABLE] == ["width", "transform"]
    assert categorized[MaturityTier.STABLE] == ["zoom"]


def test_catalog_is_read_only():
    catalog = ReferenceCatalog()
    tokens = catalog.tokens_for(MaturityTier.NEWLY_AVAILABLE)
    assert isinstance(tokens, frozenset)
    assert ":has()" in tokens
    with pytest.raises(TypeError):
        catalog._tokens[MaturityTier.STABLE] = frozenset()


@pytest.mark.parametrize("entries", [
    {"newlyAvailable": ["a"], "widelyAvailable": ["b"], "experimental": ["c"]},
    {"newlyAvailable": [], "widelyAvailable": ["b"], "experimental": ["c"], "stable": ["d"]},
    {"newlyAvailable": "abc", "widelyAvailable": ["b"], "experimental": ["c"], "stable": ["d"]},
    {"newlyAvailable": ["a", 3], "widelyAvailable": ["b"], "experimental": ["c"], "stable": ["d"]},
    ["newlyAvailable"],
])
def test_invalid_catalog_raises(entries):
    with pytest.raises(CatalogError):
        ReferenceCatalog(entries)


def test_catalog_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "newlyAvailable": ["grid"],
        "widelyAvailable": ["flex"],
        "experimental": ["popover"],
        "stable": ["float"],
    }), encoding="utf-8")
    catalog = ReferenceCatalog.from_file(str(path))
    assert FeatureClassifier(catalog).classify("grid-area") is MaturityTier.NEWLY_AVAILABLE


def test_catalog_from_invalid_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError):
        ReferenceCatalog.from_file(str(path))
