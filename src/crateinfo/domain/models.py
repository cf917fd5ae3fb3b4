from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional, Tuple, Union
from semver import Version

# registry fields passed through without interpretation
Opaque = Union[str, int, float]

class CrateVersion(BaseModel):
    """one published version of a crate."""
    model_config = ConfigDict(frozen=True)

    num: Optional[str] = None
    yanked: bool = False
    created_at: Optional[Opaque] = None
    updated_at: Optional[Opaque] = None
    id: Optional[int] = None
    downloads: Optional[int] = None
    license: Optional[Opaque] = None
    crate_size: Optional[int] = None
    readme_path: Optional[Opaque] = None
    dl_path: Optional[Opaque] = None
    checksum: Optional[Opaque] = None
    rust_version: Optional[Opaque] = None
    features: Optional[Dict[str, List[str]]] = None

    @field_validator("yanked", mode="before")
    @classmethod
    def _null_is_not_yanked(cls, value):
        return False if value is None else value

    @property
    def parsed_version(self) -> Optional[Version]:
        """the version number as a semantic version, or None if it does not parse."""
        if self.num is None:
            return None
        try:
            return Version.parse(self.num)
        except (ValueError, TypeError):
            return None

    @property
    def is_prerelease(self) -> bool:
        parsed = self.parsed_version
        return parsed is not None and parsed.prerelease is not None

class CrateCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    category: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    crates_cnt: Optional[int] = None
    created_at: Optional[Opaque] = None

class CrateKeyword(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    keyword: Optional[str] = None
    crates_cnt: Optional[int] = None
    created_at: Optional[Opaque] = None

class CrateMetadata(BaseModel):
    """the `crate` object of a registry response."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[Opaque] = None
    updated_at: Optional[Opaque] = None
    downloads: Optional[int] = None
    recent_downloads: Optional[int] = None
    homepage: Optional[Opaque] = None
    documentation: Optional[Opaque] = None
    repository: Optional[Opaque] = None
    max_version: Optional[Opaque] = None
    max_stable_version: Optional[Opaque] = None
    newest_version: Optional[Opaque] = None
    exact_match: Optional[bool] = None
    categories: Optional[List[str]] = None
    keywords: Optional[List[str]] = None
    versions: Optional[List[int]] = None

class Crate(BaseModel):
    """
    a crate as returned by one registry lookup.

    read-only once built; a fresh fetch produces a fresh instance.
    versions keep registry response order, which is neither chronological
    nor semver-sorted.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    krate: CrateMetadata = Field(alias="crate")
    versions: Tuple[CrateVersion, ...] = ()
    categories: Tuple[CrateCategory, ...] = ()
    keywords: Tuple[CrateKeyword, ...] = ()

    @field_validator("versions", "categories", mode="before")
    @classmethod
    def _null_is_empty(cls, value):
        return () if value is None else value

    @field_validator("keywords", mode="before")
    @classmethod
    def _drop_null_keywords(cls, value):
        if value is None:
            return ()
        if isinstance(value, list):
            return [k for k in value if k is not None]
        return value

    @property
    def name(self) -> str:
        return self.krate.name

    @property
    def description(self) -> Optional[str]:
        return self.krate.description

    def latest_version(self) -> Optional[CrateVersion]:
        return latest_version(self)

    def latest_stable_version(self) -> Optional[CrateVersion]:
        return latest_version(self, include_prereleases=False)

    def get_version(self, num: str) -> Optional[CrateVersion]:
        for v in self.versions:
            if v.num == num:
                return v
        return None

    def get_features_for_version(self, num: str) -> Optional[Dict[str, List[str]]]:
        """feature map of the given version, or None if unknown or featureless."""
        v = self.get_version(num)
        if v is None:
            return None
        return v.features

    def version_numbers(self) -> List[str]:
        return [v.num for v in self.versions if v.num is not None]

def latest_version(crate: Crate, include_prereleases: bool = True) -> Optional[CrateVersion]:
    """
    pick the highest non-yanked version by semantic version precedence.

    versions whose number does not parse are skipped but stay on the crate.
    on equal precedence the earliest entry in the collection wins.

    args:
        crate: the crate to inspect
        include_prereleases: when false, pre-release versions are skipped too

    returns:
        the winning version record, or None if nothing is eligible
    """
    best = None
    best_parsed = None
    for candidate in crate.versions:
        if candidate.yanked:
            continue
        parsed = candidate.parsed_version
        if parsed is None:
            continue
        if not include_prereleases and parsed.prerelease is not None:
            continue
        if best_parsed is None or parsed > best_parsed:
            best = candidate
            best_parsed = parsed
    return best
