"""
Pytest fixtures for govspeak tests.

Rendering goes through pandoc, so most assertions inspect the parsed output
with BeautifulSoup instead of comparing exact strings.
"""

from __future__ import annotations

import re

import pytest
from bs4 import BeautifulSoup

from govspeak import Document, DocumentContext

ATTACHMENT = {
    "id": "attachment.pdf",
    "content_id": "2b4d92f3-f8cd-4284-aaaa-25b3a640d26c",
    "title": "Attachment Title",
    "url": "https://www.example.com/attachment.pdf",
    "file_size": 1024,
    "number_of_pages": 1,
}

IMAGE = {
    "id": "image-1",
    "url": "https://www.example.com/image.png",
    "alt_text": "An image",
    "caption": "A caption",
    "credit": "A photographer",
}

CONTACT_ID = "4f3383e4-48a2-4461-a41d-f85ea8b89ba0"

CONTACT = {
    "content_id": CONTACT_ID,
    "title": "Government Digital Service",
    "details": {
        "post_addresses": [
            {
                "title": "",
                "street_address": "125 Kingsway",
                "locality": "Holborn",
                "region": "London",
                "postal_code": "WC2B 6NH",
                "world_location": "United Kingdom",
            }
        ],
        "email_addresses": [
            {"title": "", "email": "people@digital.cabinet-office.gov.uk"}
        ],
        "phone_numbers": [{"title": "Main", "number": "+44 20 1234 5678"}],
    },
}


# -----------------------------------------------------------------------------

def compress_html(html: str) -> str:
    """Drop line breaks and the indentation that follows them."""
    return re.sub(r"[\n\r]+\s*", "", html)


def soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def render(source: str, **options) -> str:
    return Document(source, **options).to_html()


def render_soup(source: str, **options) -> BeautifulSoup:
    return soup(render(source, **options))


# -----------------------------------------------------------------------------

@pytest.fixture
def attachment():
    return dict(ATTACHMENT)


@pytest.fixture
def image():
    return dict(IMAGE)


@pytest.fixture
def contact():
    return dict(CONTACT)


@pytest.fixture
def context():
    """A top-level context with no renderer, for running passes directly."""
    return DocumentContext("", {"attachments": [ATTACHMENT]})


@pytest.fixture
def nested_context(context):
    return context.nested("")
