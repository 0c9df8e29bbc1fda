"""Unit tests for wiki_client.auth module."""

import pytest

from src.wiki_client.auth import Authenticator, Credentials
from src.wiki_client.errors import InvalidCredentialsError


class TestAuthenticator:
    """Test cases for Authenticator."""

    def test_returns_credentials(self):
        """get_credentials returns the URL, PAT user and token."""
        auth = Authenticator("https://dev.azure.com/contoso", "token123")

        creds = auth.get_credentials()

        assert isinstance(creds, Credentials)
        assert creds.org_url == "https://dev.azure.com/contoso"
        assert creds.user == "PAT"
        assert creds.personal_access_token == "token123"

    def test_strips_trailing_slash_and_whitespace(self):
        """Trailing slashes and surrounding whitespace are removed."""
        auth = Authenticator(" https://dev.azure.com/contoso/ ", " token123\n")

        creds = auth.get_credentials()

        assert creds.org_url == "https://dev.azure.com/contoso"
        assert creds.personal_access_token == "token123"

    def test_missing_token_raises(self):
        """An empty token raises InvalidCredentialsError."""
        auth = Authenticator("https://dev.azure.com/contoso", "")

        with pytest.raises(InvalidCredentialsError) as exc_info:
            auth.get_credentials()

        assert exc_info.value.endpoint == "https://dev.azure.com/contoso"

    def test_missing_url_raises(self):
        """An empty organisation URL raises InvalidCredentialsError."""
        auth = Authenticator("", "token123")

        with pytest.raises(InvalidCredentialsError) as exc_info:
            auth.get_credentials()

        assert exc_info.value.endpoint == "unknown"

    def test_token_not_in_error_message(self):
        """The error message never contains the token."""
        auth = Authenticator("", "token123")

        with pytest.raises(InvalidCredentialsError) as exc_info:
            auth.get_credentials()

        assert "token123" not in str(exc_info.value)
