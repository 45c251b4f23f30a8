"""Session identity DTO - what the identity provider tells us about a request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionIdentity:
    """Authenticated session: session id plus the original principal's subject."""

    session_id: str
    subject: str
