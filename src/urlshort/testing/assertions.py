"""Redirect assertions for tests."""

from urlshort.http.response import Response


def assert_redirects_to(response: Response, url: str, *, status: int = 302) -> None:
    """Assert *response* is a redirect with *status* to exactly *url*."""
    assert response.status == status, (
        f"Expected redirect status {status}, got {response.status}"
    )
    location = response.location
    assert location is not None, "Expected a Location header, but none was set"
    assert location == url, f"Expected redirect to {url!r}, got {location!r}"


def assert_not_redirect(response: Response) -> None:
    """Assert *response* is not a redirect."""
    assert not response.is_redirect, (
        f"Expected a non-redirect response, got {response.status} -> {response.location!r}"
    )
