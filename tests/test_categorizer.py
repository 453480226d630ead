"""Unit tests for label → category classification."""

import pytest

from pr_changelog.categorizer import Category, ChangeRecord, LABEL_RULES, categorize


@pytest.mark.parametrize("category, keywords", LABEL_RULES)
def test_each_keyword_maps_to_its_category(category, keywords):
    for keyword in keywords:
        assert categorize([keyword]) is category


def test_labels_are_case_insensitive():
    assert categorize(["BUG"]) is Category.BUG_FIXES
    assert categorize(["Breaking-Change"]) is Category.BREAKING
    assert categorize(["Docs"]) is Category.DOCUMENTATION


def test_earlier_rule_wins():
    assert categorize(["docs", "breaking"]) is Category.BREAKING
    assert categorize(["fix", "feature"]) is Category.FEATURES
    assert categorize(["deps", "chore"]) is Category.MAINTENANCE
    assert categorize(["tests", "perf", "documentation"]) is Category.DOCUMENTATION


def test_unmatched_labels_fall_back_to_other():
    assert categorize([]) is Category.OTHER
    assert categorize(["good first issue", "wontfix"]) is Category.OTHER
    # keywords match whole label names only
    assert categorize(["bugs", "feature-request"]) is Category.OTHER


def test_unknown_labels_do_not_hide_a_match():
    assert categorize(["needs-review", "perf"]) is Category.PERFORMANCE


def test_rules_never_produce_the_uncategorized_bucket():
    assert all(category is not Category.CHANGES for category, _ in LABEL_RULES)
    assert all(category is not Category.OTHER for category, _ in LABEL_RULES)


def test_category_labels():
    assert Category.BREAKING.label == "💥 Breaking Changes"
    assert Category.OTHER.label == "🔄 Other Changes"
    assert Category.CHANGES.label == "🔄 Changes"
    assert len(Category) == 11


def test_change_record_keeps_labels_as_tuple():
    change = ChangeRecord(title="Add x", number=3, author="bob", url="https://x/pr/3", labels=["Feature"])
    assert change.labels == ("Feature",)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"title": ""},
        {"number": 0},
        {"number": -4},
        {"number": "7"},
        {"author": ""},
        {"url": ""},
    ],
)
def test_change_record_rejects_malformed_fields(kwargs):
    fields = {"title": "Add x", "number": 3, "author": "bob", "url": "https://x/pr/3"}
    fields.update(kwargs)
    with pytest.raises(ValueError):
        ChangeRecord(**fields)
