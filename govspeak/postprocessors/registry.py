"""Post-process pass descriptors and their ordered registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..registry import OrderedRegistry

PassHandler = Callable[..., None]


@dataclass(frozen=True)
class PostProcessPass:
    """A named DOM fixup, called as ``handler(soup, context)``."""

    name: str
    handler: PassHandler

    def apply(self, soup, context) -> None:
        self.handler(soup, context)


class PostProcessRegistry(OrderedRegistry[PostProcessPass]):
    def register(self, name: str, handler: Optional[PassHandler] = None):
        """Register ``handler`` as a pass, or return a decorator that does."""
        if handler is None:

            def decorator(func):
                self._append(PostProcessPass(name, func))
                return func

            return decorator

        return self._append(PostProcessPass(name, handler))
