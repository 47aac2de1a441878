"""Tests for the DOM post-process passes, run on hand-written HTML."""

from __future__ import annotations

from govspeak.postprocessors import PostProcessRegistry, apply_postprocessors
from govspeak.postprocessors.attachments import embed_attachment_links, embed_attachments
from govspeak.postprocessors.barcharts import barchart_tables
from govspeak.postprocessors.blockquotes import blockquote_last_child
from govspeak.postprocessors.buttons import buttons
from govspeak.postprocessors.footnotes import footnotes
from govspeak.postprocessors.headings import container_heading_ids
from govspeak.postprocessors.images import fix_image_escaping
from govspeak.postprocessors.tables import table_headers, table_tabindex
from tests.conftest import compress_html, soup


# -----------------------------------------------------------------------------

def test_apply_postprocessors_runs_passes_in_order(context):
    registry = PostProcessRegistry()
    calls = []
    registry.register("first", lambda doc, ctx: calls.append("first"))
    registry.register("second", lambda doc, ctx: calls.append("second"))

    apply_postprocessors("<p>x</p>", context, registry)
    assert calls == ["first", "second"]


def test_apply_postprocessors_uses_named_entities(context):
    html = apply_postprocessors("<p>It\u2019s here\u2026\u00a0now</p>", context, PostProcessRegistry())
    assert html == "<p>It&rsquo;s here&hellip;&nbsp;now</p>"


# -----------------------------------------------------------------------------

def test_blockquote_last_paragraph(context):
    doc = soup("<blockquote><p>first line</p><p>last line</p></blockquote><p>after</p>")
    blockquote_last_child(doc, context)

    first, last, after = doc.find_all("p")
    assert first.get("class") is None
    assert last["class"] == ["last-child"]
    assert after.get("class") is None


def test_fix_image_escaping(context):
    doc = soup(
        '<figure class="image embedded">'
        '&lt;div class="img"&gt;<img src="a.png" alt="A">&lt;/div&gt;'
        "&lt;figcaption&gt;Caption&lt;/figcaption&gt;"
        "</figure>"
    )
    fix_image_escaping(doc, context)

    figure = doc.find("figure")
    assert figure.select_one("div.img img")["src"] == "a.png"
    assert figure.find("figcaption").get_text() == "Caption"
    assert "&lt;" not in str(figure)


def test_fix_image_escaping_leaves_clean_figures(context):
    html = '<figure class="image embedded"><div class="img"><img alt="A" src="a.png"/></div></figure>'
    doc = soup(html)
    fix_image_escaping(doc, context)
    assert str(doc) == html


def test_barchart_classes_move_to_preceding_table(context):
    doc = soup(
        "<table><tr><td>1</td></tr></table>\n"
        '<p><govspeak-barchart class="js-barchart-table mc-stacked mc-auto-outdent"></govspeak-barchart></p>'
    )
    barchart_tables(doc, context)

    assert doc.find("table")["class"] == ["js-barchart-table", "mc-stacked", "mc-auto-outdent"]
    assert doc.find("p") is None
    assert doc.find("govspeak-barchart") is None


def test_embed_attachment_replaces_paragraph(context):
    doc = soup('<p><govspeak-embed-attachment id="attachment.pdf"></govspeak-embed-attachment></p>')
    embed_attachments(doc, context)

    assert doc.find("p", class_="gem-c-attachment__metadata") is not None
    assert doc.contents[0].name == "section"


def test_embed_attachment_removes_unknown_placeholder(context):
    doc = soup('<p><govspeak-embed-attachment id="nope"></govspeak-embed-attachment></p><p>after</p>')
    embed_attachments(doc, context)
    assert str(doc) == "<p>after</p>"


def test_embed_attachment_link_stays_inline(context):
    doc = soup('<p>See <govspeak-embed-attachment-link id="attachment.pdf"></govspeak-embed-attachment-link>.</p>')
    embed_attachment_links(doc, context)

    span = doc.p.find("span", class_="gem-c-attachment-link")
    assert span.a.get_text() == "Attachment Title"
    assert doc.p.get_text().endswith(").")


# -----------------------------------------------------------------------------

TABLE = """
<table>
<thead>
<tr><th># Name</th><th>Age</th><th> </th></tr>
</thead>
<tbody>
<tr><td># Alice</td><td>30</td><td></td></tr>
<tr><td>#Bob</td><td>40</td><td></td></tr>
<tr><td>#</td><td>50</td><td></td></tr>
<tr><td><a href="/carol"># Carol</a></td><td>60</td><td></td></tr>
</tbody>
</table>
"""


def test_table_header_cells(context):
    doc = soup(TABLE)
    table_headers(doc, context)

    cells = doc.find("thead").find_all(["th", "td"])
    assert [cell.name for cell in cells] == ["th", "th", "td"]
    assert [cell.get_text() for cell in cells[:2]] == ["Name", "Age"]
    assert [cell.get("scope") for cell in cells] == ["col", "col", None]


def test_table_row_headers(context):
    doc = soup(TABLE)
    table_headers(doc, context)

    alice, bob, empty, carol = [row.contents[0] for row in doc.find("tbody").find_all("tr")]

    assert alice.name == "th"
    assert alice["scope"] == "row"
    assert alice.get_text() == "Alice"

    assert bob.name == "td"
    assert bob.get_text() == "#Bob"
    assert not bob.has_attr("scope")

    assert empty.name == "th"
    assert empty["scope"] == "row"
    assert empty.get_text() == ""

    assert carol.name == "th"
    assert carol.a["href"] == "/carol"
    assert carol.a.get_text() == "Carol"


def test_table_row_headers_only_change_first_cell(context):
    doc = soup("<table><tbody><tr><td>x</td><td># y</td></tr></tbody></table>")
    table_headers(doc, context)
    assert [cell.name for cell in doc.find_all(["td", "th"])] == ["td", "td"]


def test_table_tabindex_skips_barcharts(context):
    doc = soup('<table><tr><td>1</td></tr></table><table class="js-barchart-table"><tr><td>2</td></tr></table>')
    table_tabindex(doc, context)

    plain, chart = doc.find_all("table")
    assert plain["tabindex"] == "0"
    assert not chart.has_attr("tabindex")


# -----------------------------------------------------------------------------

def test_buttons_become_components(context):
    doc = soup(
        '<p><a role="button" class="govuk-button" href="/start" data-start="true">Start now</a></p>'
    )
    buttons(doc, context)

    button = doc.find("a")
    assert button["class"] == ["gem-c-button", "govuk-button", "govuk-button--start"]
    assert button["data-module"] == "govuk-button"
    assert button["draggable"] == "false"
    assert button.find("svg") is not None


def test_buttons_are_not_replaced_twice(context):
    doc = soup('<p><a role="button" class="govuk-button govuk-button--secondary" href="/x">Go</a></p>')
    buttons(doc, context)
    once = str(doc)
    buttons(doc, context)
    assert str(doc) == once


def test_footnotes(context):
    doc = soup(
        '<p>Text<a href="#fn1" class="footnote-ref" id="fnref1" role="doc-noteref"><sup>1</sup></a></p>'
        '<section class="footnotes" role="doc-endnotes"><hr><ol>'
        '<li id="fn1"><p>Note<a href="#fnref1" class="footnote-back" role="doc-backlink">back</a></p></li>'
        '<li id="fn2"><p>Other<a href="#fnref2" role="doc-backlink"><sup>2</sup></a></p></li>'
        "</ol></section>"
    )
    footnotes(doc, context)

    assert doc.find("a", class_="footnote-ref").get_text() == "[footnote 1]"
    first, second = doc.select("[role=doc-backlink]")
    assert first["aria-label"] == "go to where this is referenced"
    assert second["aria-label"] == "go to where this is referenced 2"


def test_container_heading_ids(context):
    doc = soup(
        '<div class="section"><h2 id="intro">Intro</h2><p>text</p></div>'
        '<div class="information"><h2 id="intro">Intro</h2></div>'
        '<div class="section"><h2 id="intro">Intro</h2><div><h3 id="deep">Deep</h3></div></div>'
    )
    container_heading_ids(doc, context)

    assert [heading["id"] for heading in doc.find_all(["h2", "h3"])] == [
        "section-header-1-intro",
        "information-header-1-intro",
        "section-header-2-intro",
        "deep",
    ]


def test_container_heading_ids_skip_nested_renders(nested_context):
    html = '<div class="section"><h2 id="intro">Intro</h2></div>'
    doc = soup(html)
    container_heading_ids(doc, nested_context)
    assert compress_html(str(doc)) == html
