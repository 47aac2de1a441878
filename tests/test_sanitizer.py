"""Tests for the bleach-based sanitizer."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from govspeak.sanitizer import sanitize_html
from tests.conftest import soup


# -----------------------------------------------------------------------------

def test_removes_event_handlers():
    assert sanitize_html('<p onclick="steal()">hi</p>') == "<p>hi</p>"


def test_drops_script_with_its_content():
    assert sanitize_html("<script>doBadThings();</script><p>ok</p>") == "<p>ok</p>"


def test_drops_style_with_its_content():
    assert sanitize_html("<style>p { color: red }</style><p>ok</p>") == "<p>ok</p>"


def test_unwraps_unknown_elements():
    assert sanitize_html("<blink>some content</blink>") == "some content"


def test_keeps_allowed_extra_elements():
    html = sanitize_html(
        "<uncommon-element>some content</uncommon-element>",
        allowed_elements=["uncommon-element"],
    )
    assert html == "<uncommon-element>some content</uncommon-element>"


def test_keeps_data_and_aria_attributes():
    doc = soup(sanitize_html('<div data-module="govuk-accordion" aria-label="x">y</div>'))
    assert doc.div["data-module"] == "govuk-accordion"
    assert doc.div["aria-label"] == "x"


def test_keeps_text_alignment_only():
    doc = soup(sanitize_html('<table><tr><td style="text-align: right; color: red">1</td></tr></table>'))
    style = doc.td["style"]
    assert "text-align" in style
    assert "color" not in style


def test_removes_javascript_links():
    doc = soup(sanitize_html('<a href="javascript:alert(1)">x</a>'))
    assert not doc.a.has_attr("href")


def test_keeps_mailto_and_fragment_links():
    doc = soup(sanitize_html('<a href="mailto:a@example.com">a</a><a href="#fn1">1</a>'))
    assert [a["href"] for a in doc.find_all("a")] == ["mailto:a@example.com", "#fn1"]


def test_only_youtube_iframes_keep_their_source():
    doc = soup(
        sanitize_html(
            '<iframe src="https://www.youtube.com/embed/abc"></iframe>'
            '<iframe src="https://evil.example.com/"></iframe>'
        )
    )
    youtube, other = doc.find_all("iframe")
    assert youtube["src"] == "https://www.youtube.com/embed/abc"
    assert not other.has_attr("src")


def test_details_is_not_allowed_by_default():
    doc = soup(sanitize_html("<details><summary>More</summary>text</details>"))
    assert doc.find("details") is None
    assert doc.find("summary") is not None


def test_single_allowed_element_name():
    html = sanitize_html(
        "<details><summary>More</summary>text</details>",
        allowed_elements="details",
    )
    assert soup(html).find("details") is not None


def test_concurrent_sanitizing_gives_identical_results():
    html = (
        "<p>" + "<b>x</b><i>z</i>" * 200 + "</p>"
        "<script>doBadThings();</script>"
        '<p onclick="steal()">tail</p>'
    )
    expected = sanitize_html(html)

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(sanitize_html, [html] * 240))

    assert results == [expected] * 240
