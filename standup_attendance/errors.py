"""Exception hierarchy for the attendance backend."""

from __future__ import annotations


class SlackAttendanceError(Exception):
    """Base class for all errors raised by the attendance backend."""


class DatabaseError(SlackAttendanceError):
    """A storage operation failed."""

    def __init__(self, detail: object) -> None:
        self.detail = str(detail)
        super().__init__(f"Database error: {self.detail}")


class SlackApiError(SlackAttendanceError):
    """A call to the Slack API failed or returned something unusable."""

    def __init__(self, detail: object) -> None:
        self.detail = str(detail)
        super().__init__(f"Slack API error: {self.detail}")


class AuthenticationError(SlackAttendanceError):
    """Credentials or tokens were rejected."""

    def __init__(self, detail: object) -> None:
        self.detail = str(detail)
        super().__init__(f"Authentication error: {self.detail}")


class InternalError(SlackAttendanceError):
    """An unexpected internal failure."""

    def __init__(self) -> None:
        super().__init__("Internal server error")