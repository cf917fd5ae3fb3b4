import asyncio
import logging
import re
from typing import Dict, Iterable, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..config import get_registry_url
from ..domain.errors import DecodeError, InvalidInputError, StatusError, TransportError
from ..domain.models import Crate
from ..domain.results import FetchFailure, FetchResult, FetchSuccess
from .transport import TimeoutTypes, build_async_client, build_sync_client

logger = logging.getLogger(__name__)

_BAD_NAME_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


def validate_user_agent(user_agent: str) -> None:
    """the registry rejects anonymous callers, so an empty user agent is a caller error."""
    if not isinstance(user_agent, str) or not user_agent.strip():
        raise InvalidInputError("User Agent must be a string with at least one character")


def validate_crate_name(crate_name: str) -> None:
    if not isinstance(crate_name, str) or not crate_name:
        raise InvalidInputError("Crate name must be a non-empty string")
    if _BAD_NAME_CHARS.search(crate_name):
        raise InvalidInputError(f"Crate name '{crate_name}' contains whitespace or control characters")
    if crate_name in (".", ".."):
        raise InvalidInputError(f"Crate name '{crate_name}' is not a valid path segment")


def crate_url(base_url: str, crate_name: str) -> str:
    return f"{base_url.rstrip('/')}/{quote(crate_name, safe='')}"


def _to_result(crate_name: str, response: httpx.Response) -> FetchResult:
    if not response.is_success:
        logger.debug(f"registry answered {response.status_code} for '{crate_name}'")
        return FetchFailure(StatusError(response.status_code, crate_name))

    try:
        crate = Crate.model_validate_json(response.content)
    except ValidationError as e:
        logger.debug(f"could not decode response for '{crate_name}': {e}")
        return FetchFailure(DecodeError(crate_name, e))

    return FetchSuccess(crate)


class AsyncCrateClient:
    """
    async crates.io client holding one pooled http connection.

    every lookup returns a FetchResult; nothing is retried or cached.
    """

    def __init__(
        self,
        user_agent: str,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: TimeoutTypes = None,
    ):
        validate_user_agent(user_agent)
        self.user_agent = user_agent
        self.base_url = (base_url or get_registry_url()).rstrip("/")
        self.client = build_async_client(user_agent, transport=transport, timeout=timeout)

    async def get_async(self, crate_name: str) -> FetchResult:
        """
        fetch one crate.

        args:
            crate_name: name of the crate, used as a url path segment

        returns:
            FetchSuccess with the decoded crate, or FetchFailure with the error
        """
        try:
            validate_crate_name(crate_name)
            url = crate_url(self.base_url, crate_name)
            logger.debug(f"GET {url}")
            response = await self.client.get(url)
        except InvalidInputError as e:
            return FetchFailure(e)
        except httpx.InvalidURL as e:
            return FetchFailure(InvalidInputError(f"Invalid registry url '{self.base_url}': {e}"))
        except httpx.RequestError as e:
            logger.debug(f"request for '{crate_name}' failed: {e!r}")
            return FetchFailure(TransportError(url, e))

        return _to_result(crate_name, response)

    async def get_multi_async(self, crate_names: Iterable[str]) -> Dict[str, FetchResult]:
        """fetch several crates concurrently; results keep the order names were given in."""
        names = list(dict.fromkeys(crate_names))
        results = await asyncio.gather(*(self.get_async(name) for name in names))
        return dict(zip(names, results))

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "AsyncCrateClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class SyncCrateClient:
    """blocking crates.io client."""

    def __init__(
        self,
        user_agent: str,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: TimeoutTypes = None,
    ):
        validate_user_agent(user_agent)
        self.user_agent = user_agent
        self.base_url = (base_url or get_registry_url()).rstrip("/")
        self.client = build_sync_client(user_agent, transport=transport, timeout=timeout)

    def get(self, crate_name: str) -> FetchResult:
        try:
            validate_crate_name(crate_name)
            url = crate_url(self.base_url, crate_name)
            logger.debug(f"GET {url}")
            response = self.client.get(url)
        except InvalidInputError as e:
            return FetchFailure(e)
        except httpx.InvalidURL as e:
            return FetchFailure(InvalidInputError(f"Invalid registry url '{self.base_url}': {e}"))
        except httpx.RequestError as e:
            logger.debug(f"request for '{crate_name}' failed: {e!r}")
            return FetchFailure(TransportError(url, e))

        return _to_result(crate_name, response)

    def get_multi(self, crate_names: Iterable[str]) -> Dict[str, FetchResult]:
        """fetch several crates one after another over the same connection."""
        results = {}
        for name in crate_names:
            if name not in results:
                results[name] = self.get(name)
        return results

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "SyncCrateClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class CrateClientBuilder:
    """configures and builds sync or async clients for one user agent."""

    def __init__(self, user_agent: str):
        self.user_agent = user_agent
        self._base_url: Optional[str] = None
        self._transport = None
        self._timeout: TimeoutTypes = None

    def base_url(self, url: str) -> "CrateClientBuilder":
        self._base_url = url
        return self

    def transport(self, transport) -> "CrateClientBuilder":
        self._transport = transport
        return self

    def timeout(self, timeout: TimeoutTypes) -> "CrateClientBuilder":
        self._timeout = timeout
        return self

    def build_sync(self) -> SyncCrateClient:
        """
        raises:
            InvalidInputError: if the user agent is empty
        """
        return SyncCrateClient(
            self.user_agent,
            base_url=self._base_url,
            transport=self._transport,
            timeout=self._timeout,
        )

    def build_async(self) -> AsyncCrateClient:
        """
        raises:
            InvalidInputError: if the user agent is empty
        """
        return AsyncCrateClient(
            self.user_agent,
            base_url=self._base_url,
            transport=self._transport,
            timeout=self._timeout,
        )


async def get_async(
    crate_name: str,
    user_agent: str,
    *,
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: TimeoutTypes = None,
) -> FetchResult:
    """
    fetch one crate with a short-lived client.

    input is checked before any connection is opened. if the calling task is
    cancelled while waiting on the registry the request is abandoned and the
    cancellation propagates; no partial crate is produced.
    """
    try:
        validate_user_agent(user_agent)
        validate_crate_name(crate_name)
    except InvalidInputError as e:
        return FetchFailure(e)

    async with AsyncCrateClient(user_agent, base_url=base_url, transport=transport, timeout=timeout) as client:
        return await client.get_async(crate_name)


async def get_multi_async(
    crate_names: Iterable[str],
    user_agent: str,
    *,
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: TimeoutTypes = None,
) -> Dict[str, FetchResult]:
    names = list(dict.fromkeys(crate_names))
    try:
        validate_user_agent(user_agent)
    except InvalidInputError as e:
        return {name: FetchFailure(e) for name in names}

    async with AsyncCrateClient(user_agent, base_url=base_url, transport=transport, timeout=timeout) as client:
        return await client.get_multi_async(names)


def get(
    crate_name: str,
    user_agent: str,
    *,
    base_url: Optional[str] = None,
    transport: Optional[httpx.BaseTransport] = None,
    timeout: TimeoutTypes = None,
) -> FetchResult:
    """blocking version of get_async."""
    try:
        validate_user_agent(user_agent)
        validate_crate_name(crate_name)
    except InvalidInputError as e:
        return FetchFailure(e)

    with SyncCrateClient(user_agent, base_url=base_url, transport=transport, timeout=timeout) as client:
        return client.get(crate_name)


def get_multi(
    crate_names: Iterable[str],
    user_agent: str,
    *,
    base_url: Optional[str] = None,
    transport: Optional[httpx.BaseTransport] = None,
    timeout: TimeoutTypes = None,
) -> Dict[str, FetchResult]:
    names = list(dict.fromkeys(crate_names))
    try:
        validate_user_agent(user_agent)
    except InvalidInputError as e:
        return {name: FetchFailure(e) for name in names}

    with SyncCrateClient(user_agent, base_url=base_url, transport=transport, timeout=timeout) as client:
        return client.get_multi(names)
