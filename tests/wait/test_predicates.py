"""Tests for element predicates."""

from steadyfind.wait import all_of, always, has_attribute, is_enabled, is_visible
from tests.fixtures.browser_fixtures import FakeElement


class TestPredicates:
    """Tests for the built-in predicates."""

    def test_always(self):
        assert always(FakeElement("a"))
        assert always(None)

    def test_is_visible(self):
        assert is_visible(FakeElement("a"))
        assert not is_visible(FakeElement("a", visible=False))
        assert not is_visible(None)

    def test_is_enabled(self):
        assert is_enabled(FakeElement("a"))
        assert not is_enabled(FakeElement("a", enabled=False))
        assert not is_enabled(None)

    def test_has_attribute(self):
        predicate = has_attribute("disabled")

        assert predicate(FakeElement("a", attributes={"disabled": ""}))
        assert not predicate(FakeElement("a"))
        assert not predicate(None)
        assert predicate.__name__ == "has_attribute('disabled')"

    def test_all_of(self):
        predicate = all_of(is_visible, is_enabled)

        assert predicate(FakeElement("a"))
        assert not predicate(FakeElement("a", enabled=False))
        assert not predicate(FakeElement("a", visible=False))
