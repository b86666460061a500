import pytest

from core.tiers import AccessTier


@pytest.mark.parametrize("value,expected", [
    ("Basic", AccessTier.BASIC),
    ("Hobbyist", AccessTier.HOBBYIST),
    ("startup", AccessTier.STARTUP),
    (" STANDARD ", AccessTier.STANDARD),
    ("Professional", AccessTier.PROFESSIONAL),
    ("Enterprise", AccessTier.ENTERPRISE),
    (5, AccessTier.ENTERPRISE),
    ("3", AccessTier.STANDARD),
    (AccessTier.HOBBYIST, AccessTier.HOBBYIST),
])
def test_parse_known_levels(value, expected):
    assert AccessTier.parse(value) is expected


@pytest.mark.parametrize("value", ["Platinum", "", None, 42, -1, True, "9"])
def test_unknown_levels_fail_closed_to_basic(value, caplog):
    assert AccessTier.parse(value) is AccessTier.BASIC
    assert "Unrecognized subscription level" in caplog.text


def test_tiers_are_ordered():
    assert list(AccessTier) == sorted(AccessTier)
    assert AccessTier.BASIC < AccessTier.HOBBYIST < AccessTier.STARTUP < AccessTier.STANDARD
    assert AccessTier.STANDARD < AccessTier.PROFESSIONAL < AccessTier.ENTERPRISE


def test_label_matches_plan_names():
    assert [t.label for t in AccessTier] == [
        "Basic", "Hobbyist", "Startup", "Standard", "Professional", "Enterprise",
    ]
