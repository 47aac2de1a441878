# govspeak/components.py

"""
Rendering of the shared page components embedded in govspeak output.

Components are Django templates under ``govspeak/templates/govspeak/components``
rendered with a standalone template engine, so the package works with or
without a host Django project.
"""

from functools import lru_cache

from django.template import Context, Engine

from .config import DEFAULT_LOCALE, TEMPLATES_DIR, configure_django


@lru_cache(maxsize=1)
def get_template_engine():
    configure_django()
    return Engine(dirs=[str(TEMPLATES_DIR)], autoescape=True)


def render_component(name, locale=DEFAULT_LOCALE, **context):
    """
    Render the ``name`` component and collapse it to a single line.

    Markup produced here is fed back into the markdown parser when it comes
    from a nested render, so blank lines would split it into separate blocks.
    """
    template = get_template_engine().get_template(f"govspeak/components/{name}.html")
    context["lang"] = "" if locale == DEFAULT_LOCALE else locale
    html = template.render(Context(context))
    return "".join(line.strip() for line in html.splitlines() if line.strip())
