"""Settings shared by the CLI, the default mux and the redirect layer."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Where to listen, how loud to log, what the fallback says.

    ::

        config = AppConfig(port=3000, greeting="Nothing here")
    """

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    log_level: str = "info"

    # Body of every response from default_mux()
    greeting: str = "Hello, world!"

    # Status used by App.add_redirects and `urlshort serve`
    redirect_status: int = 302
