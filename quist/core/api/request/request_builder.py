"""Request builder for Gist API requests."""
from typing import Dict, Optional

from ..auth import BasicAuthCredential

GITHUB_V3_MEDIA_TYPE = 'application/vnd.github.v3+json'


class RequestBuilder:
    """Builds URLs and headers for API requests."""

    def __init__(
        self,
        base_url: str,
        credential: BasicAuthCredential,
        user_agent: str,
        accept: str = GITHUB_V3_MEDIA_TYPE,
        extra_headers: Optional[Dict[str, str]] = None
    ):
        """Initializes request builder."""
        self.base_url = base_url.rstrip('/')
        self.credential = credential
        self.user_agent = user_agent
        self.accept = accept
        self.extra_headers = extra_headers or {}

    def gists_url(self) -> str:
        """Builds the Gist collection URL."""
        return f"{self.base_url}/gists"

    def gist_url(self, gist_id: str) -> str:
        """Builds the URL of a single Gist."""
        return f"{self.base_url}/gists/{gist_id}"

    def build_headers(self) -> Dict[str, str]:
        """Builds request headers, including Authorization."""
        headers = {
            **self.extra_headers,
            'Accept': self.accept,
            'User-Agent': self.user_agent,
        }
        return self.credential.apply(headers)
