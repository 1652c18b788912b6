"""
Error taxonomy shared by every app's service layer.

Services raise these; apps.core.responses maps them to HTTP statuses.
Field-level validation failures use django.core.exceptions.ValidationError
as raised by Model.full_clean().
"""


class NotFound(Exception):
    """A well-formed identifier that matches no record."""
    message = "Not found"

    def __init__(self, identifier=None, message: str = None):
        self.identifier = identifier
        if message:
            self.message = message
        super().__init__(f"{self.message}: {identifier}" if identifier is not None else self.message)


class InvalidIdentifier(NotFound):
    """An identifier that cannot possibly match a record (bad format)."""
    message = "Invalid identifier"
