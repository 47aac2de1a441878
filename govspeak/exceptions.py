# govspeak/exceptions.py


class GovspeakError(Exception):
    """Base class for all errors raised while rendering govspeak."""


class RegistryFrozenError(GovspeakError):
    """Raised when a macro or pass is registered after the registry was frozen."""


class MalformedMacroError(GovspeakError):
    """
    Raised by a macro handler when the matched macro cannot be expanded.

    The preprocessor catches it, logs a warning and leaves the matched text
    as it was written.
    """

    def __init__(self, macro: str, reason: str):
        self.macro = macro
        self.reason = reason
        super().__init__(f"{macro}: {reason}")


class RenderError(GovspeakError):
    """Raised when a render cannot complete."""


class NestingDepthExceeded(RenderError):
    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"Nested render depth {depth} exceeds the limit of {limit}"
        )
