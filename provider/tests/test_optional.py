import pytest

from aap_provider.core.errors import PreconditionViolation
from aap_provider.core.optional import (
    NULL,
    UNKNOWN,
    Known,
    Null,
    Unknown,
    known_or_null,
    known_text,
    require_known,
    value_or_none,
)


@pytest.mark.unit
class TestAttrValue:
    """Tri-state attribute values."""

    def test_variants_are_exclusive(self):
        assert (UNKNOWN.is_unknown, UNKNOWN.is_null, UNKNOWN.is_known) == (True, False, False)
        assert (NULL.is_unknown, NULL.is_null, NULL.is_known) == (False, True, False)
        known = Known(3)
        assert (known.is_unknown, known.is_null, known.is_known) == (False, False, True)

    def test_equality_is_by_variant_and_value(self):
        assert Unknown() == UNKNOWN
        assert Null() == NULL
        assert Known(1) == Known(1)
        assert Known(1) != Known(2)
        assert Known("") != NULL
        assert NULL != UNKNOWN

    def test_known_or_null(self):
        assert known_or_null(None) == NULL
        assert known_or_null(0) == Known(0)
        assert known_or_null("") == Known("")


def test_value_or_none_unwraps_known_and_null():
    assert value_or_none(Known(201), "inventory_id") == 201
    assert value_or_none(NULL, "inventory_id") is None


def test_value_or_none_rejects_unknown():
    with pytest.raises(PreconditionViolation) as exc:
        value_or_none(UNKNOWN, "extra_vars")

    assert "extra_vars" in str(exc.value)


@pytest.mark.parametrize("attr,expected", [(NULL, "null"), (UNKNOWN, "unknown")])
def test_require_known_reports_state(attr, expected):
    with pytest.raises(PreconditionViolation) as exc:
        require_known(attr, "template_id")

    assert expected in str(exc.value)
    assert "template_id" in str(exc.value)


def test_known_text_skips_empty_values():
    assert known_text(Known("/api/v2/jobs/3/")) == "/api/v2/jobs/3/"
    assert known_text(Known("")) is None
    assert known_text(NULL) is None
    assert known_text(UNKNOWN) is None
