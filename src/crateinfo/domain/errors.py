from typing import Optional

class CrateError(Exception):
    """base class for exceptions in crateinfo."""
    pass

class InvalidInputError(CrateError):
    """raised for a crate name or user agent rejected before any request is made."""
    pass

class TransportError(CrateError):
    """the registry could not be reached (dns, connect, tls, timeout)."""
    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Could not reach registry at {url}: {cause}")
        self.__cause__ = cause

class StatusError(CrateError):
    """the registry answered with a non-2xx status."""
    def __init__(self, status_code: int, crate_name: Optional[str] = None):
        self.status_code = status_code
        self.crate_name = crate_name
        if status_code == 404:
            message = "Crate name is not found. Did you misspell the crate name?"
        else:
            message = f"Server Status Error: {status_code}"
        super().__init__(message)

    @property
    def not_found(self) -> bool:
        return self.status_code == 404

class DecodeError(CrateError):
    """the response body could not be read as a crate record."""
    def __init__(self, crate_name: str, cause: Exception):
        self.crate_name = crate_name
        self.cause = cause
        super().__init__(f"Could not decode registry response for '{crate_name}': {cause}")
        self.__cause__ = cause
