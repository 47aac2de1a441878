from functools import lru_cache
from pathlib import Path

# Recursive renders (notes, accordions, lists...) stop with
# NestingDepthExceeded beyond this depth.
MAX_NESTING_DEPTH = 16

DEFAULT_LOCALE = "en"

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# Pandoc markdown extensions switched off so the reader behaves like the
# govspeak dialect: "$", "@", "^" and "%" are macro tokens, raw HTML emitted by
# macros must pass through untouched and there are no fancy or implicit blocks.
DISABLED_EXTENSIONS = [
    "tex_math_dollars",
    "raw_tex",
    "citations",
    "superscript",
    "subscript",
    "strikeout",
    "fancy_lists",
    "example_lists",
    "task_lists",
    "implicit_figures",
    "yaml_metadata_block",
    "pandoc_title_block",
    "inline_notes",
    "line_blocks",
    "simple_tables",
    "multiline_tables",
    "grid_tables",
    "table_captions",
    "native_divs",
    "native_spans",
    "markdown_in_html_blocks",
    "raw_attribute",
    "fenced_divs",
    "bracketed_spans",
    "space_in_atx_header",
]

ENABLED_EXTENSIONS = [
    "abbreviations",
]


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    The reader format is pandoc's own markdown with the extension toggles
    above; the writer is plain html5 with source line breaks preserved.
    """
    reader = "markdown"
    reader += "".join(f"-{name}" for name in DISABLED_EXTENSIONS)
    reader += "".join(f"+{name}" for name in ENABLED_EXTENSIONS)

    return {
        "format": reader,
        "to": "html5",
        "extra_args": [
            # Keep the author's line breaks instead of re-wrapping at 72 columns
            "--wrap=preserve",
        ],
    }


@lru_cache(maxsize=1)
def get_sanitizer_config():
    """Allowed tags, attributes, protocols and CSS properties for bleach."""
    allowed_tags = frozenset(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "section",
            "article",
            "aside",
            "cite",
            "q",
            "mark",
            "ins",
            "del",
            "s",
            "small",
            "sup",
            "sub",
            "strong",
            "b",
            "em",
            "i",
            "u",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            "var",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            "colgroup",
            "col",
            # media
            "img",
            "figure",
            "figcaption",
            "iframe",
            "svg",
            "path",
            # links and interactive
            "a",
            "summary",
            # semantic
            "time",
            "address",
            "abbr",
            "acronym",
            # placeholders resolved by the post-processor
            "govspeak-embed-attachment",
            "govspeak-embed-attachment-link",
            "govspeak-barchart",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title", "role", "lang", "dir"],
        "a": ["href", "rel", "hreflang", "tabindex", "draggable"],
        "img": ["src", "alt", "width", "height", "loading"],
        "iframe": ["src", "width", "height", "title", "frameborder", "allow", "allowfullscreen"],
        "th": ["colspan", "rowspan", "scope", "style"],
        "td": ["colspan", "rowspan", "style"],
        "table": ["tabindex"],
        "ol": ["start", "type", "reversed"],
        "col": ["span"],
        "colgroup": ["span"],
        "blockquote": ["cite"],
        "q": ["cite"],
        "ins": ["cite", "datetime"],
        "del": ["cite", "datetime"],
        "time": ["datetime"],
        "abbr": ["title"],
        "acronym": ["title"],
        # SVG attributes for component icons
        "svg": ["xmlns", "viewBox", "viewbox", "width", "height", "focusable"],
        "path": ["d", "fill"],
    }

    # Prefix families allowed on every element
    allowed_attr_prefixes = ("data-", "aria-")

    allowed_protocols = frozenset({"http", "https", "mailto", "tel"})

    allowed_css_properties = frozenset({"text-align"})

    # Only video embeds are allowed to become iframes
    allowed_iframe_sources = ("https://www.youtube.com/embed/",)

    return {
        "tags": allowed_tags,
        "attributes": allowed_attrs,
        "attribute_prefixes": allowed_attr_prefixes,
        "protocols": allowed_protocols,
        "css_properties": allowed_css_properties,
        "iframe_sources": allowed_iframe_sources,
        # Removed together with their content, not just unwrapped
        "drop_with_content": ("script", "style", "noscript", "template"),
    }


@lru_cache(maxsize=1)
def configure_django():
    """
    Configure Django settings for standalone template rendering.

    Hosts that already run inside a Django project keep their own settings.
    """
    from django.conf import settings

    if not settings.configured:
        settings.configure(USE_I18N=False)
    return settings
