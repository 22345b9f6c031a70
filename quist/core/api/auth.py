"""
Authentication for the Gist API.

Only HTTP Basic authentication with a ``username:token`` pair is supported.
There is no anonymous mode: missing or malformed credentials raise
UnsupportedAuthError before any request is made.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

import aiohttp

from ..exceptions import UnsupportedAuthError

SEPARATOR = ':'


@dataclass(frozen=True)
class BasicAuthCredential:
    """Username and personal access token for Basic authentication."""
    username: str
    token: str = field(repr=False)

    def to_aiohttp(self) -> aiohttp.BasicAuth:
        """Convert to aiohttp BasicAuth."""
        return aiohttp.BasicAuth(self.username, self.token, encoding='utf-8')

    def header_value(self) -> str:
        """Returns the ``Basic <base64(username:token)>`` header value."""
        return self.to_aiohttp().encode()

    def apply(self, headers: Dict[str, str]) -> Dict[str, str]:
        """
        Attach the Authorization header to a request's headers.

        Args:
            headers: Header mapping to update in place

        Returns:
            The same mapping, for chaining
        """
        headers['Authorization'] = self.header_value()
        return headers


def parse_auth(raw: Optional[str]) -> BasicAuthCredential:
    """
    Parse a ``username:token`` string.

    Args:
        raw: Credentials as given on the command line

    Returns:
        Parsed credential

    Raises:
        UnsupportedAuthError: If ``raw`` is missing or does not split into
            exactly two non-empty parts on ``:``
    """
    if not raw:
        raise UnsupportedAuthError("no credentials given; expected 'username:token'")

    parts = raw.split(SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise UnsupportedAuthError()

    username, token = parts
    return BasicAuthCredential(username=username, token=token)
