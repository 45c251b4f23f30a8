"""Keycloak OIDC provider for token introspection."""

import logging
from dataclasses import dataclass, field

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCUser:
    """Authenticated user from an introspected token."""

    subject: str
    session_id: str
    email: str | None = None
    username: str | None = None
    realm_roles: list[str] = field(default_factory=list)


class KeycloakProvider:
    """Keycloak OIDC - validates access tokens and extracts session info."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    async def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None if it is not active."""
        try:
            token_info = await self._keycloak.a_introspect(token)
        except KeycloakError as e:
            logger.warning("token introspection failed: %s", e)
            return None
        return user_from_token_info(token_info)


def user_from_token_info(token_info: dict) -> OIDCUser | None:
    """Build OIDCUser from an introspection response."""
    if not token_info.get("active"):
        return None
    subject = token_info.get("sub")
    session_id = (
        token_info.get("sid")
        or token_info.get("session_state")
        or token_info.get("jti")
    )
    if not subject or not session_id:
        return None
    return OIDCUser(
        subject=subject,
        session_id=session_id,
        email=token_info.get("email"),
        username=token_info.get("preferred_username"),
        realm_roles=token_info.get("realm_access", {}).get("roles", []),
    )
