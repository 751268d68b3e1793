"""Test utilities: an in-process ASGI client and redirect assertions::

    from urlshort.testing import TestClient, assert_redirects_to
"""

from urlshort.testing.assertions import assert_not_redirect, assert_redirects_to
from urlshort.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_not_redirect",
    "assert_redirects_to",
]
