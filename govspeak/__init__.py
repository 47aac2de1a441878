# govspeak/__init__.py

from .context import DocumentContext, SharedCounter
from .document import Document, to_html
from .exceptions import (
    GovspeakError,
    MalformedMacroError,
    NestingDepthExceeded,
    RegistryFrozenError,
    RenderError,
)
from .renderer import Renderer

__version__ = "0.1.0"

__all__ = [
    "Document",
    "DocumentContext",
    "GovspeakError",
    "MalformedMacroError",
    "NestingDepthExceeded",
    "RegistryFrozenError",
    "RenderError",
    "Renderer",
    "SharedCounter",
    "to_html",
]
