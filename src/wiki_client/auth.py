"""Authentication module for Azure DevOps credentials.

Azure DevOps accepts a personal access token (PAT) as the password of an
HTTP basic-auth pair. The user name is ignored by the service; ``PAT`` is
sent for readability in server logs.
"""

from typing import NamedTuple

from .errors import InvalidCredentialsError


class Credentials(NamedTuple):
    """Azure DevOps API credentials."""
    org_url: str
    user: str
    personal_access_token: str


class Authenticator:
    """Validates and hands out the credentials for one publish run.

    Credentials are supplied by the caller (usually the CLI) and are never
    logged.

    Raises:
        InvalidCredentialsError: If the organisation URL or token is empty

    Example:
        >>> auth = Authenticator("https://dev.azure.com/contoso/", "s3cret")
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.org_url}")
    """

    USER = "PAT"

    def __init__(self, org_url: str, personal_access_token: str):
        """Store the raw credential values.

        Args:
            org_url: Azure DevOps organisation URL (e.g. https://dev.azure.com/contoso)
            personal_access_token: Personal access token with wiki read/write scope
        """
        self._org_url = org_url
        self._personal_access_token = personal_access_token

    def get_credentials(self) -> Credentials:
        """Return validated credentials.

        Returns:
            Credentials: A named tuple containing org_url, user and token

        Raises:
            InvalidCredentialsError: If the URL or the token is missing
        """
        org_url = (self._org_url or "").strip()
        token = (self._personal_access_token or "").strip()

        if not org_url or not token:
            raise InvalidCredentialsError(endpoint=org_url or "unknown")

        return Credentials(
            org_url=org_url.rstrip("/"),
            user=self.USER,
            personal_access_token=token,
        )
