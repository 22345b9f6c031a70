"""
Data models for the Gist API.

Uses dataclasses for immutable, type-safe data structures. Responses are
modelled as a tagged union (``Ok`` or ``Err``) because the API answers with
structurally different bodies on the same endpoint.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar, Union

T = TypeVar('T')


@dataclass
class GistPayload:
    """
    Body of a Gist creation request.

    Files are always serialized in name order so request bodies are stable
    whatever order they were added in.

    Example:
        >>> payload = GistPayload(files={'b.txt': 'b', 'a.txt': 'a'})
        >>> list(payload.to_dict()['files'])
        ['a.txt', 'b.txt']
    """
    files: Dict[str, str] = field(default_factory=dict)
    description: Optional[str] = None

    def add_file(self, name: str, content: Union[str, bytes]) -> 'GistPayload':
        """Add a file, decoding bytes lossily as UTF-8."""
        if isinstance(content, bytes):
            content = content.decode('utf-8', errors='replace')
        self.files[name] = content
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API wire format."""
        result: Dict[str, Any] = {}
        if self.description is not None:
            result['description'] = self.description
        result['files'] = {
            name: {'content': self.files[name]} for name in sorted(self.files)
        }
        return result

    def to_json(self) -> str:
        """Compact JSON rendering of ``to_dict()``."""
        return json.dumps(self.to_dict(), separators=(',', ':'), ensure_ascii=False)


@dataclass(frozen=True)
class Gist:
    """
    A created Gist.

    Attributes:
        id: Opaque Gist id, used for deletion
        url: Public (HTML) URL of the Gist
    """
    id: str
    url: str

    @classmethod
    def from_dict(cls, data: Any) -> Optional['Gist']:
        """
        Decode the success shape of a creation response.

        Prefers ``html_url`` (the page a person opens) and falls back to
        ``url``. Returns None if the body is not a success shape.
        """
        if not isinstance(data, dict):
            return None
        gist_id = data.get('id')
        url = data.get('html_url', data.get('url'))
        if not isinstance(gist_id, str) or not isinstance(url, str):
            return None
        return cls(id=gist_id, url=url)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful API response."""
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Error API response carrying the service's message verbatim."""
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    @classmethod
    def from_dict(cls, data: Any) -> Optional['Err']:
        """Decode the error shape, or None if the body is something else."""
        if isinstance(data, dict) and isinstance(data.get('message'), str):
            return cls(message=data['message'])
        return None


ApiResponse = Union[Ok[T], Err]
