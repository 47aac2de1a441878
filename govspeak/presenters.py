"""
Presenters that normalise the host's reference records for macros and templates.

Records are plain mappings supplied by the publishing application. Missing
keys present as empty values rather than errors.
"""

from django.template.defaultfilters import filesizeformat
from django.utils.html import format_html, format_html_join

from .config import configure_django

FILE_TYPES = {
    "csv": "Comma-separated Values",
    "doc": "MS Word Document",
    "docx": "MS Word Document",
    "ods": "OpenDocument Spreadsheet",
    "odt": "OpenDocument Text",
    "pdf": "Portable Document Format",
    "ppt": "MS PowerPoint Presentation",
    "pptx": "MS PowerPoint Presentation",
    "rtf": "Rich Text Format",
    "txt": "Plain text",
    "xls": "MS Excel Spreadsheet",
    "xlsx": "MS Excel Spreadsheet",
    "xml": "XML Document",
    "zip": "Zip archive",
}


class ImagePresenter:
    def __init__(self, image):
        self.image = image

    @property
    def id(self):
        return self.image.get("id")

    @property
    def url(self):
        return self.image.get("url") or ""

    @property
    def alt_text(self):
        return self.image.get("alt_text") or ""

    @property
    def caption(self):
        return (self.image.get("caption") or "").strip()

    @property
    def credit(self):
        return (self.image.get("credit") or "").strip()

    def figcaption(self):
        return bool(self.caption or self.credit)

    def figcaption_html(self):
        paragraphs = []
        if self.caption:
            paragraphs.append((self.caption,))
        if self.credit:
            paragraphs.append((f"Image credit: {self.credit}",))
        return format_html(
            "<figcaption>{}</figcaption>",
            format_html_join("", "<p>{}</p>", paragraphs),
        )


class AttachmentImagePresenter(ImagePresenter):
    """An image attachment; the title doubles as alt text."""

    @property
    def alt_text(self):
        return self.image.get("title") or ""

    @property
    def caption(self):
        return ""

    @property
    def credit(self):
        return ""


class AttachmentPresenter:
    def __init__(self, attachment):
        self.attachment = attachment

    @property
    def id(self):
        return self.attachment.get("id")

    @property
    def content_id(self):
        return self.attachment.get("content_id")

    @property
    def url(self):
        return self.attachment.get("url") or ""

    @property
    def title(self):
        # Titles are embedded in single-line constructs
        return (self.attachment.get("title") or "").replace("\n", " ")

    @property
    def file_extension(self):
        extension = self.attachment.get("file_extension")
        if not extension and "." in self.url:
            extension = self.url.rsplit(".", 1)[-1]
        return (extension or "").lower().lstrip(".")

    @property
    def file_type(self):
        return self.file_extension.upper()

    @property
    def file_type_name(self):
        return FILE_TYPES.get(self.file_extension, "")

    @property
    def file_size(self):
        size = self.attachment.get("file_size")
        if not size:
            return ""
        configure_django()
        return filesizeformat(size)

    @property
    def number_of_pages(self):
        pages = self.attachment.get("number_of_pages")
        if not pages:
            return ""
        return f"{pages} page" if int(pages) == 1 else f"{pages} pages"

    @property
    def attributes(self):
        """File type, size and page count, in that order, when known."""
        return [
            value
            for value in (self.file_type, self.file_size, self.number_of_pages)
            if value
        ]

    def attachment_attributes(self):
        return ", ".join(self.attributes)

    def link(self, body, url):
        return format_html('<a href="{}">{}</a>', url, body)


class ContactPresenter:
    def __init__(self, contact):
        self.contact = contact

    @property
    def content_id(self):
        return self.contact.get("content_id") or ""

    @property
    def title(self):
        return self.contact.get("title") or ""

    @property
    def description(self):
        return self.contact.get("description") or ""

    def _details(self, key):
        details = self.contact.get("details") or {}
        return list(self.contact.get(key) or details.get(key) or [])

    @property
    def post_addresses(self):
        addresses = []
        for address in self._details("post_addresses"):
            lines = [
                address.get(field)
                for field in (
                    "street_address",
                    "locality",
                    "region",
                    "postal_code",
                    "world_location",
                )
                if address.get(field)
            ]
            addresses.append({"title": address.get("title", ""), "lines": lines})
        return addresses

    @property
    def email_addresses(self):
        return self._details("email_addresses")

    @property
    def phone_numbers(self):
        return self._details("phone_numbers")

    @property
    def contact_form_links(self):
        return self._details("contact_form_links")
