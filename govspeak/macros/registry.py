"""Macro descriptors and the ordered registry the preprocessor applies."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern, Union

from ..exceptions import MalformedMacroError
from ..registry import OrderedRegistry
from .patterns import bracketed

logger = logging.getLogger(__name__)

MacroHandler = Callable[..., str]


@dataclass(frozen=True)
class Macro:
    """
    A named text pattern and the handler that rewrites each match.

    The handler receives the render context followed by the pattern's
    captured groups (``None`` for groups that did not take part in the
    match) and returns the replacement text.
    """

    name: str
    pattern: Pattern[str]
    handler: MacroHandler

    def apply(self, text: str, context) -> str:
        """Replace every match in ``text`` in a single left-to-right pass."""

        def replace(match):
            try:
                return self.handler(context, *match.groups())
            except MalformedMacroError as exc:
                logger.warning("Leaving %s macro unexpanded: %s", self.name, exc.reason)
                return match.group(0)

        return self.pattern.sub(replace, text)


class MacroRegistry(OrderedRegistry[Macro]):
    """
    Macros in precedence order.

    Earlier macros see the raw source, later ones see everything earlier ones
    emitted; there is no second pass.
    """

    def register(
        self,
        name: str,
        pattern: Optional[Union[str, Pattern[str]]] = None,
        handler: Optional[MacroHandler] = None,
    ):
        """
        Register ``handler`` for ``pattern``.

        Without a pattern the ``{::name}...{:/name}`` form is used. Without a
        handler, returns a decorator.
        """
        if pattern is None:
            pattern = bracketed(name)
        elif isinstance(pattern, str):
            pattern = re.compile(pattern)

        if handler is None:

            def decorator(func):
                self._append(Macro(name, pattern, func))
                return func

            return decorator

        return self._append(Macro(name, pattern, handler))
