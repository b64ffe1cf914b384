"""
Errors raised by the wiki_race core.
"""


class LinkLookupError(Exception):
    """Raised by a link lookup when the links of a page cannot be fetched."""
    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Link lookup failed for '{key}': {reason}")


class RegistrySealedError(RuntimeError):
    """Raised when the visited registry is written while a round's lookups are in flight."""
    pass
