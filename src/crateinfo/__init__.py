"""typed crates.io package metadata lookups."""
from .config import VERSION as __version__
from .domain.errors import CrateError, InvalidInputError, TransportError, StatusError, DecodeError
from .domain.models import Crate, CrateVersion, CrateMetadata, CrateCategory, CrateKeyword, latest_version
from .domain.results import FetchResult, FetchSuccess, FetchFailure, FetchState
from .registry.client import (
    AsyncCrateClient,
    SyncCrateClient,
    CrateClientBuilder,
    get,
    get_async,
    get_multi,
    get_multi_async,
)

__all__ = [
    "__version__",
    "CrateError",
    "InvalidInputError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "Crate",
    "CrateVersion",
    "CrateMetadata",
    "CrateCategory",
    "CrateKeyword",
    "latest_version",
    "FetchResult",
    "FetchSuccess",
    "FetchFailure",
    "FetchState",
    "AsyncCrateClient",
    "SyncCrateClient",
    "CrateClientBuilder",
    "get",
    "get_async",
    "get_multi",
    "get_multi_async",
]
