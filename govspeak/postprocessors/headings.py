# govspeak/postprocessors/headings.py

# Containers whose headings are namespaced by their position on the page
INDEXED_CONTAINERS = ("section", "call-to-action", "information")


def container_heading_ids(soup, context):
    """
    Prefix ids of a container's direct children with the container class and
    its 1-based position among containers of that class, e.g.
    ``section-header-2-contents``.

    Nested renders are left alone; the page-level render numbers everything
    once.
    """
    if context.is_nested:
        return

    for class_name in INDEXED_CONTAINERS:
        for index, container in enumerate(soup.select(f"div.{class_name}"), start=1):
            for child in container.find_all(True, recursive=False):
                if child.get("id"):
                    child["id"] = f"{class_name}-header-{index}-{child['id']}"
