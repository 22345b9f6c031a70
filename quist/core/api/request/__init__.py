"""Request construction and response decoding."""
from .request_builder import RequestBuilder, GITHUB_V3_MEDIA_TYPE
from .response_handler import ResponseHandler

__all__ = [
    'RequestBuilder',
    'ResponseHandler',
    'GITHUB_V3_MEDIA_TYPE',
]
