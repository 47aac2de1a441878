"""
``{barchart stacked compact negative}`` under a table.

The markdown parser has no attribute lists, so the macro leaves a marker
element carrying the classes; the barchart post-process pass moves them onto
the table above it.
"""

MARKER_TAG = "govspeak-barchart"


def barchart(context, options):
    classes = ["js-barchart-table"]
    if "stacked" in options:
        classes.append("mc-stacked")
    if "compact" in options:
        classes.append("compact")
    if "negative" in options:
        classes.append("mc-negative")
    classes.append("mc-auto-outdent")

    return '\n\n<%s class="%s"></%s>\n\n' % (MARKER_TAG, " ".join(classes), MARKER_TAG)
