"""Write a Response to an ASGI ``send`` callable."""

from urlshort._internal.asgi import Send
from urlshort.http.response import Response

# 1xx, 204 and 304 never carry a body
_BODYLESS = frozenset({204, 304})


async def send_response(response: Response, send: Send, *, method: str = "GET") -> None:
    """Emit ``http.response.start`` and a single ``http.response.body``.

    ``Content-Length`` always describes the full body. The body itself is
    left out for HEAD requests and for statuses that forbid one.
    """
    body = response.body_bytes
    if response.status < 200 or response.status in _BODYLESS:
        body = b""

    headers = [
        (b"content-type", response.content_type.encode("latin-1")),
        (b"content-length", str(len(body)).encode("latin-1")),
    ]
    headers.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    )

    await send({"type": "http.response.start", "status": response.status, "headers": headers})
    await send({"type": "http.response.body", "body": b"" if method == "HEAD" else body})
