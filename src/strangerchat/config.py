"""
Client Configuration

Settings for talking to the chat relays. Defaults match the public service;
each value can be overridden from the environment with a STRANGERCHAT_
prefixed variable.
"""

import os
from dataclasses import dataclass

DEFAULT_STATUS_URL = "https://omegle.com/status"
DEFAULT_RELAY_DOMAIN = "omegle.com"
DEFAULT_LANG = "en"
DEFAULT_CAPS = "recaptcha2,t"

# Seconds before any single request is abandoned
DEFAULT_TIMEOUT = 30.0


@dataclass
class ClientSettings:
    """
    Connection settings shared by the directory and chat sessions.

    Attributes:
        status_url: URL of the status resource listing relay servers
        relay_domain: Domain appended to a relay name to form its host
        lang: Language code sent when starting a chat
        caps: Client capabilities advertised when starting a chat
        timeout: Per-request timeout in seconds
    """

    status_url: str = DEFAULT_STATUS_URL
    relay_domain: str = DEFAULT_RELAY_DOMAIN
    lang: str = DEFAULT_LANG
    caps: str = DEFAULT_CAPS
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Build settings from environment variables, falling back to defaults."""
        return cls(
            status_url=os.environ.get(
                "STRANGERCHAT_STATUS_URL", DEFAULT_STATUS_URL
            ),
            relay_domain=os.environ.get(
                "STRANGERCHAT_RELAY_DOMAIN", DEFAULT_RELAY_DOMAIN
            ),
            lang=os.environ.get("STRANGERCHAT_LANG", DEFAULT_LANG),
            caps=os.environ.get("STRANGERCHAT_CAPS", DEFAULT_CAPS),
            timeout=float(
                os.environ.get("STRANGERCHAT_TIMEOUT", str(DEFAULT_TIMEOUT))
            ),
        )

    def relay_url(self, endpoint: str, path: str) -> str:
        """Return the URL of ``path`` on the relay named ``endpoint``."""
        return f"https://{endpoint}.{self.relay_domain}/{path}"
