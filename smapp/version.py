"""
SDK version and User-Agent helpers.
"""

from typing import Final

VERSION: Final[str] = "v0.7.0"
USER_AGENT_HEADER: Final[str] = "User-Agent"


def getUserAgent() -> str:
    """Get User-Agent value sent with every request."""
    return f"smapp-sdk-python/{VERSION}"
