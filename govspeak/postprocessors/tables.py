# govspeak/postprocessors/tables.py
"""
Postprocessors for tables.

Authors mark header cells with a leading ``#``:

- in the header row ``# Name`` becomes a column header ``Name``, and an
  empty header cell becomes a plain ``td``;
- in the body, a first cell of ``#`` or ``# Name`` becomes a row header,
  while ``#Name`` is ordinary data.
"""

import re

from bs4 import Tag

from .utils import first_text_node, has_class

HEADER_MARKER = re.compile(r"^# ")
ROW_HEADER = re.compile(r"^#(?:$|\s)")


def table_headers(soup, context):
    for cell in soup.select("thead th"):
        text = first_text_node(cell)
        if text is not None and HEADER_MARKER.match(text):
            text.replace_with(HEADER_MARKER.sub("", str(text), count=1))

        if cell.get_text().strip():
            cell["scope"] = "col"
        else:
            # A header cell with nothing in it reads better as data
            cell.clear()
            cell.name = "td"

    for row in soup.find_all("tr"):
        if row.find_parent("thead") is not None:
            continue

        cell = row.find(True, recursive=False)
        if not isinstance(cell, Tag) or cell.name != "td":
            continue
        if not ROW_HEADER.match(cell.get_text().strip()):
            continue

        # Edit the first text node only, so links in the cell survive
        text = first_text_node(cell)
        if text is not None:
            text.replace_with(ROW_HEADER.sub("", str(text).lstrip(), count=1))

        cell.name = "th"
        cell["scope"] = "row"


def table_tabindex(soup, context):
    """Make tables keyboard focusable so wide ones can be scrolled."""
    for table in soup.find_all("table"):
        if not has_class(table, "js-barchart-table"):
            table["tabindex"] = "0"
