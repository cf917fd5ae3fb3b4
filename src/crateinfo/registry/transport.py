import httpx
from typing import Optional, Union

from ..config import UNIQUE_USER_AGENT

TimeoutTypes = Union[float, httpx.Timeout, None]

def format_user_agent(user_agent: str) -> str:
    """the header value sent to the registry, which requires callers to identify themselves."""
    return f"{user_agent.strip()} - Brought to you by: {UNIQUE_USER_AGENT}"

def _client_options(user_agent: str, timeout: TimeoutTypes) -> dict:
    options = {"headers": {"User-Agent": format_user_agent(user_agent)}}
    # leave httpx's own default in place unless the caller picked one
    if timeout is not None:
        options["timeout"] = timeout
    return options

def build_async_client(
    user_agent: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: TimeoutTypes = None,
) -> httpx.AsyncClient:
    """
    build the async http client used for registry lookups.

    args:
        user_agent: caller identification, already validated
        transport: optional httpx transport, e.g. httpx.MockTransport in tests
        timeout: optional timeout; None keeps the httpx default
    """
    return httpx.AsyncClient(transport=transport, **_client_options(user_agent, timeout))

def build_sync_client(
    user_agent: str,
    transport: Optional[httpx.BaseTransport] = None,
    timeout: TimeoutTypes = None,
) -> httpx.Client:
    """blocking twin of build_async_client."""
    return httpx.Client(transport=transport, **_client_options(user_agent, timeout))
