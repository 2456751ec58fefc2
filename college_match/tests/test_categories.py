import pytest

from college_match.recommendations.categories import (
    CATEGORY_KEYWORDS,
    derive_matched_types,
    type_matches,
)


class TestDeriveMatchedTypes:
    def test_example_interests(self):
        assert derive_matched_types(["Machine Learning", "Biology"]) == {"Engineering", "Medical"}

    def test_case_insensitive_substring(self):
        assert derive_matched_types(["Applied PHYSICS and optics"]) == {"Science"}

    @pytest.mark.parametrize("label", sorted(CATEGORY_KEYWORDS))
    def test_each_keyword_matches_only_its_category(self, label):
        for keyword in CATEGORY_KEYWORDS[label]:
            assert derive_matched_types([keyword.title()]) == {label}, keyword

    def test_no_keywords(self):
        assert derive_matched_types(["Cooking", "Gaming"]) == set()

    def test_empty_list(self):
        assert derive_matched_types([]) == set()

    def test_field_hitting_several_categories(self):
        assert derive_matched_types(["Business economics"]) == {"Management", "Commerce"}

    def test_no_duplicates(self):
        assert derive_matched_types(["Software", "Computer networks"]) == {"Engineering"}

    def test_has_eight_categories(self):
        assert set(CATEGORY_KEYWORDS) == {
            "Engineering",
            "Medical",
            "Management",
            "University",
            "Agricultural University",
            "Arts & Science",
            "Science",
            "Commerce",
        }


class TestTypeMatches:
    def test_string_type_uses_substring(self):
        assert type_matches("Agricultural University", {"University"})

    def test_list_type_uses_membership(self):
        assert type_matches(["Engineering", "University"], {"Engineering"})
        assert not type_matches(["Agricultural University"], {"University"})

    def test_missing_type(self):
        assert not type_matches(None, {"Engineering"})

    def test_no_labels(self):
        assert not type_matches("Engineering", set())
