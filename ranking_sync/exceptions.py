"""
Exceptions raised by the ranking store, codec and sync controller.
"""

from typing import Optional


class RankingSyncError(Exception):
    """Base exception for ranking synchronization errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class MalformedPayload(RankingSyncError):
    """Raised when a ranking payload cannot be decoded."""
    def __init__(self, details: str):
        super().__init__(
            f"Malformed ranking payload: {details}",
            "The ranking data could not be read.",
        )
        self.details = details


class TransportError(RankingSyncError):
    """Raised when a request to the ranking store fails or returns an error status."""
    def __init__(self, details: str, status_code: Optional[int] = None):
        super().__init__(
            f"Ranking store request failed: {details}",
            "Could not reach the ranking server.",
        )
        self.details = details
        self.status_code = status_code


class SyncStateError(RankingSyncError):
    """Raised when an operation is invoked from a state that does not allow it."""
    def __init__(self, action: str, state: str):
        super().__init__(f"Cannot {action} while {state}")
        self.action = action
        self.state = state
