"""Tests for the Playwright search context binding."""

from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError

from steadyfind.adapters import PlaywrightElement, PlaywrightSearchContext
from steadyfind.finder_exceptions import (
    EvaluationFailedException,
    NoSuchElementException,
    StaleElementReferenceException,
)
from steadyfind.wait import WaitPolicy, has_attribute, is_enabled, is_visible

DETACHED = "Element is not attached to the DOM"


@pytest.fixture
def page():
    """Mock Playwright page."""
    return MagicMock()


def handle(visible=True):
    element = MagicMock()
    element.is_visible.return_value = visible
    element.is_enabled.return_value = True
    return element


def detached_handle():
    element = MagicMock()
    for read in (element.is_visible, element.is_enabled, element.get_attribute):
        read.side_effect = PlaywrightError(DETACHED)
    return element


class TestPlaywrightSearchContext:
    """Tests for query translation and error mapping."""

    def test_find_element(self, page):
        element = handle()
        page.query_selector.return_value = element

        found = PlaywrightSearchContext(page).find_element("#a")

        assert isinstance(found, PlaywrightElement)
        assert found.handle is element
        page.query_selector.assert_called_once_with("#a")

    def test_missing_element_raises_no_such_element(self, page):
        page.query_selector.return_value = None

        with pytest.raises(NoSuchElementException):
            PlaywrightSearchContext(page).find_element("#a")

    def test_find_elements(self, page):
        elements = [handle(), handle()]
        page.query_selector_all.return_value = elements

        found = PlaywrightSearchContext(page).find_elements("li")

        assert [element.handle for element in found] == elements

    def test_detached_error_is_stale(self, page):
        page.query_selector_all.side_effect = PlaywrightError(DETACHED)

        with pytest.raises(StaleElementReferenceException):
            PlaywrightSearchContext(page).find_elements("li")

    def test_navigation_error_is_stale(self, page):
        page.query_selector.side_effect = PlaywrightError(
            "Execution context was destroyed, most likely because of a navigation"
        )

        with pytest.raises(StaleElementReferenceException):
            PlaywrightSearchContext(page).find_element("#a")

    def test_other_errors_propagate(self, page):
        page.query_selector_all.side_effect = PlaywrightError("Target page, context or browser has been closed")

        with pytest.raises(PlaywrightError):
            PlaywrightSearchContext(page).find_elements("li")

    def test_within(self, page):
        element = handle()

        assert PlaywrightSearchContext(page).within(element).root is element

    def test_within_unwraps_element(self, page):
        element = handle()

        assert PlaywrightSearchContext(page).within(PlaywrightElement(element)).root is element


class TestPlaywrightElement:
    """Tests for predicate reads on wrapped handles."""

    def test_reads_delegate_to_handle(self):
        element = handle(visible=False)
        element.get_attribute.return_value = "submit"
        wrapped = PlaywrightElement(element)

        assert wrapped.is_visible() is False
        assert wrapped.is_enabled() is True
        assert wrapped.get_attribute("type") == "submit"
        element.get_attribute.assert_called_once_with("type")

    @pytest.mark.parametrize("predicate", [is_visible, is_enabled, has_attribute("disabled")])
    def test_detached_reads_are_stale(self, predicate):
        with pytest.raises(StaleElementReferenceException):
            predicate(PlaywrightElement(detached_handle()))

    def test_other_read_errors_propagate(self):
        element = MagicMock()
        element.is_enabled.side_effect = PlaywrightError("Target page, context or browser has been closed")

        with pytest.raises(PlaywrightError):
            PlaywrightElement(element).is_enabled()

    def test_other_attributes_delegate(self):
        element = handle()
        PlaywrightElement(element).click()

        element.click.assert_called_once_with()

    def test_equality_follows_handle(self):
        element = handle()

        assert PlaywrightElement(element) == PlaywrightElement(element)
        assert PlaywrightElement(element) != PlaywrightElement(handle())
        assert len({PlaywrightElement(element), PlaywrightElement(element)}) == 1


class TestPlaywrightWithFinder:
    """Tests driving the finder through the binding."""

    def test_stale_then_stable(self, finder, clock, page):
        rows = [handle(), handle(visible=False), handle()]
        page.query_selector_all.side_effect = [
            PlaywrightError(DETACHED),
            rows,
            rows,
            rows,
        ]
        policy = WaitPolicy(timeout_ms=1000, interval_ms=100, min_stable_ms=200)

        found = finder.find_stable_set(
            PlaywrightSearchContext(page), "tr", policy.with_predicate(is_visible)
        )

        assert [element.handle for element in found] == [rows[0], rows[2]]
        assert clock.now() == 300

    def test_handle_detached_during_predicate_is_retried(self, finder, clock, page):
        live = handle()
        page.query_selector_all.side_effect = [[detached_handle()], [live], [live], [live]]
        policy = WaitPolicy(timeout_ms=1000, interval_ms=100, min_stable_ms=200)

        found = finder.find_stable_set(
            PlaywrightSearchContext(page), "button", policy.with_predicate(is_enabled)
        )

        assert found == [PlaywrightElement(live)]
        assert page.query_selector_all.call_count == 4
        assert clock.now() == 300

    def test_find_single_retries_detached_handle(self, finder, page):
        live = handle()
        page.query_selector.side_effect = [detached_handle(), live]

        found = finder.find_single(
            PlaywrightSearchContext(page), "#a", WaitPolicy(timeout_ms=1000).with_predicate(is_visible)
        )

        assert found.handle is live

    def test_closed_browser_aborts(self, finder, page):
        page.query_selector.side_effect = PlaywrightError("Target page, context or browser has been closed")

        with pytest.raises(EvaluationFailedException) as exc_info:
            finder.find_single(PlaywrightSearchContext(page), "#a", WaitPolicy(timeout_ms=1000))

        assert isinstance(exc_info.value.cause, PlaywrightError)
        assert page.query_selector.call_count == 1
