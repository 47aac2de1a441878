# govspeak/postprocessors/footnotes.py
"""
Postprocessor that makes footnote links readable out of context.

Pandoc renders a reference as ``<a class="footnote-ref" href="#fn1"><sup>1</sup></a>``
and each note with a ``role="doc-backlink"`` link back to it. References
read as ``[footnote 1]`` and backlinks get a descriptive label.
"""

import re

NON_DIGITS = re.compile(r"\D")


def footnotes(soup, context):
    for reference in soup.select("a.footnote-ref"):
        number = NON_DIGITS.sub("", reference.get("href", ""))
        target = reference.find("sup") or reference
        target.string = f"[footnote {number}]"

    for backlink in soup.select("[role=doc-backlink]"):
        label = "go to where this is referenced"
        # Only repeated references number their backlinks with a <sup>; pandoc
        # writes one backlink per note, which keeps the plain label
        sup = backlink.find("sup")
        if sup is not None:
            label += f" {sup.get_text()}"
        backlink["aria-label"] = label
