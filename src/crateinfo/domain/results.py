"""outcome of a single crate fetch."""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .errors import CrateError, DecodeError, InvalidInputError, StatusError, TransportError
from .models import Crate


class FetchState(str, Enum):
    """terminal state a fetch ended in."""
    INPUT_REJECTED = "input_rejected"
    TRANSPORT_FAILED = "transport_failed"
    STATUS_REJECTED = "status_rejected"
    DECODE_FAILED = "decode_failed"
    DECODED = "decoded"


@dataclass(frozen=True)
class FetchSuccess:
    """the registry answered and the body decoded into a crate."""
    crate: Crate
    ok: ClassVar[bool] = True

    @property
    def state(self) -> FetchState:
        return FetchState.DECODED

    def unwrap(self) -> Crate:
        return self.crate


@dataclass(frozen=True)
class FetchFailure:
    """the fetch failed; `error` says how."""
    error: CrateError
    ok: ClassVar[bool] = False

    @property
    def state(self) -> FetchState:
        if isinstance(self.error, InvalidInputError):
            return FetchState.INPUT_REJECTED
        if isinstance(self.error, TransportError):
            return FetchState.TRANSPORT_FAILED
        if isinstance(self.error, StatusError):
            return FetchState.STATUS_REJECTED
        if isinstance(self.error, DecodeError):
            return FetchState.DECODE_FAILED
        raise ValueError(f"Unknown error type: {type(self.error)}")

    def unwrap(self) -> Crate:
        raise self.error


FetchResult = Union[FetchSuccess, FetchFailure]
