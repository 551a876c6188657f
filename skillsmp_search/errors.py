"""Errors raised along the search pipeline."""


class SkillsMPError(Exception):
    """Base class for every failure the CLI reports."""


class TransportError(SkillsMPError):
    """The request could not be sent or the response could not be read."""


class DecodeError(SkillsMPError):
    """The response body is not valid JSON or does not match the schema."""


class ApiLogicalError(SkillsMPError):
    """The API answered with ``success: false``."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class MissingDataError(SkillsMPError):
    """The API did not report failure but sent no data either."""
