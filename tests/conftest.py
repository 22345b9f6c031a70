"""Pytest fixtures for quist tests."""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from quist.core.api import APIConfig, BasicAuthCredential

GIST_ID = 'aa5a315d61ae9438b18d'
GIST_HTML_URL = f'https://gist.github.com/{GIST_ID}'


@pytest.fixture
def credential():
    """Returns the credential whose header is ``Basic dXNlcm5hbWU6dG9rZW4=``."""
    return BasicAuthCredential(username='username', token='token')


@pytest.fixture
def gist_created_body():
    """Returns a Gist creation response as sent by GitHub."""
    return {
        'url': f'https://api.github.com/gists/{GIST_ID}',
        'forks_url': f'https://api.github.com/gists/{GIST_ID}/forks',
        'commits_url': f'https://api.github.com/gists/{GIST_ID}/commits',
        'id': GIST_ID,
        'node_id': 'MDQ6R2lzdGFhNWEzMTVkNjFhZTk0MzhiMThk',
        'git_pull_url': f'https://gist.github.com/{GIST_ID}.git',
        'git_push_url': f'https://gist.github.com/{GIST_ID}.git',
        'html_url': GIST_HTML_URL,
        'created_at': '2010-04-14T02:15:15Z',
        'updated_at': '2011-06-20T11:34:15Z',
        'description': 'Hello World Examples',
        'comments': 0,
        'comments_url': f'https://api.github.com/gists/{GIST_ID}/comments/',
    }


@pytest.fixture
def text_files(tmp_path):
    """Creates foo.txt and bar.txt, returned in non-alphabetical order."""
    foo = tmp_path / 'foo.txt'
    bar = tmp_path / 'bar.txt'
    foo.write_bytes(b'foo is here\n')
    bar.write_bytes(b'bar is here\n')
    return [foo, bar]


@dataclass
class RecordedRequest:
    """A request received by the fake Gist API."""
    method: str
    path: str
    headers: Mapping[str, str]
    body: bytes

    def json(self) -> Any:
        return json.loads(self.body)


@dataclass
class FakeGistAPI:
    """
    In-process stand-in for the GitHub Gist endpoints.

    Records every request and answers with the configured status and body.
    """
    create_status: int = 201
    create_body: Any = None
    delete_status: int = 204
    delete_body: Optional[Dict[str, Any]] = None
    requests: List[RecordedRequest] = field(default_factory=list)
    base_url: str = ''

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_post('/gists', self._create)
        app.router.add_delete('/gists/{gist_id}', self._delete)
        return app

    async def _record(self, request: web.Request) -> None:
        body = await request.read()
        self.requests.append(
            RecordedRequest(request.method, request.path, request.headers.copy(), body)
        )

    async def _create(self, request: web.Request) -> web.Response:
        await self._record(request)
        if isinstance(self.create_body, bytes):
            return web.Response(status=self.create_status, body=self.create_body)
        return web.json_response(self.create_body, status=self.create_status)

    async def _delete(self, request: web.Request) -> web.Response:
        await self._record(request)
        if self.delete_body is None:
            return web.Response(status=self.delete_status)
        return web.json_response(self.delete_body, status=self.delete_status)

    def by_method(self, method: str) -> List[RecordedRequest]:
        return [r for r in self.requests if r.method == method]


@pytest_asyncio.fixture
async def gist_api(gist_created_body):
    """Runs a FakeGistAPI on a local port."""
    api = FakeGistAPI(create_body=gist_created_body)
    server = TestServer(api.make_app())
    await server.start_server()
    api.base_url = str(server.make_url('')).rstrip('/')
    try:
        yield api
    finally:
        await server.close()


@pytest.fixture
def api_config(gist_api):
    """API configuration pointing at the fake Gist API."""
    return APIConfig(base_url=gist_api.base_url, user_agent='quist/develop')
