"""
Custom exceptions for the backend application.
"""

class WikiRaceException(Exception):
    """Base exception for the application."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class InvalidQueryException(WikiRaceException):
    """Raised when a required query parameter is missing or blank."""
    pass

class PageNotFoundException(WikiRaceException):
    """Raised when a requested Wikipedia article does not exist."""
    pass
