import os

VERSION = "0.1.0"

CRATES_IO_URL = "https://crates.io/api/v1/crates"
UNIQUE_USER_AGENT = f"crateinfo/{VERSION}"

REGISTRY_URL_ENV = "CRATEINFO_REGISTRY_URL"

def get_registry_url() -> str:
    """get the registry endpoint, honouring the environment override."""
    url = os.environ.get(REGISTRY_URL_ENV, "").strip()
    if not url:
        return CRATES_IO_URL
    return url.rstrip("/")
