"""Unit tests for static reference data helpers."""
import pytest

from venturedesk.data.reference import (
    INVESTMENT_CATEGORIES,
    JOB_ROLES,
    JOB_TAGS,
    investment_category_entries,
    slug_to_label,
    to_slug,
)


class TestToSlug:
    @pytest.mark.parametrize(
        "label, slug",
        [
            ("Health/Longevity", "health-longevity"),
            ("Network States", "network-states"),
            ("AI", "ai"),
            ("  DeFi  ", "defi"),
            ("Prime Intellect", "prime-intellect"),
        ],
    )
    def test_examples(self, label, slug):
        assert to_slug(label) == slug

    def test_strips_punctuation(self):
        assert to_slug("Succinct (SP1)!") == "succinct-sp1"


class TestSlugToLabel:
    def test_title_cases_words(self):
        assert slug_to_label("smart-contracts") == "Smart Contracts"

    def test_ignores_empty_parts(self):
        assert slug_to_label("a--b") == "A B"


class TestVocabularies:
    def test_slugs_unique(self):
        for entries in (JOB_TAGS, JOB_ROLES):
            slugs = [e.slug for e in entries]
            assert len(slugs) == len(set(slugs))

    def test_every_category_has_entry(self):
        entries = investment_category_entries()
        assert len(entries) == len(INVESTMENT_CATEGORIES)
        assert all(e.slug == to_slug(e.label) for e in entries)
