"""Product name and version helpers."""
from importlib.metadata import PackageNotFoundError, version as _dist_version

PRODUCT_NAME = 'quist'


def get_name() -> str:
    """Returns the product name used in the User-Agent and error output."""
    return PRODUCT_NAME


def get_version() -> str:
    """Returns the installed version, or ``develop`` for a source checkout."""
    try:
        return _dist_version(PRODUCT_NAME)
    except PackageNotFoundError:
        return 'develop'


def user_agent() -> str:
    return f"{get_name()}/{get_version()}"
