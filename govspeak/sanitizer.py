# govspeak/sanitizer.py

import logging

import bleach
from bleach.css_sanitizer import CSSSanitizer
from bs4 import BeautifulSoup

from .config import get_sanitizer_config

logger = logging.getLogger(__name__)


def _attribute_filter(config):
    attributes = config["attributes"]
    global_attributes = set(attributes["*"])
    prefixes = config["attribute_prefixes"]
    iframe_sources = config["iframe_sources"]

    def allow(tag, name, value):
        if name in global_attributes or name.startswith(prefixes):
            return True
        if name not in attributes.get(tag, ()):
            return False
        if tag == "iframe" and name == "src":
            return value.startswith(iframe_sources)
        return True

    return allow


def _drop_executable_content(html, allowed_elements):
    # bleach unwraps disallowed tags but keeps their text, which for script
    # and style would publish the code itself.
    dropped = [
        name
        for name in get_sanitizer_config()["drop_with_content"]
        if name not in allowed_elements
    ]
    soup = BeautifulSoup(html, "html.parser")
    elements = soup.find_all(dropped)
    if not elements:
        return html

    for element in elements:
        logger.debug("Dropping <%s> element during sanitization", element.name)
        element.decompose()
    return str(soup)


def sanitize_html(html, allowed_elements=frozenset()):
    """
    Sanitize rendered HTML against the govspeak allow-list using bleach.

    Elements in ``allowed_elements`` are kept in addition to the defaults.
    Disallowed markup is removed; sanitization never fails the render.
    """
    if isinstance(allowed_elements, str):
        allowed_elements = (allowed_elements,)
    allowed_elements = frozenset(allowed_elements)

    html = _drop_executable_content(html, allowed_elements)

    # bleach parsers keep state between calls, so every call gets its own
    config = get_sanitizer_config()
    return bleach.clean(
        html,
        tags=config["tags"] | allowed_elements,
        attributes=_attribute_filter(config),
        protocols=config["protocols"],
        css_sanitizer=CSSSanitizer(allowed_css_properties=config["css_properties"]),
        strip=True,  # Remove disallowed tags instead of escaping them
        strip_comments=True,
    )
