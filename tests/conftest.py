"""shared fixtures: a trimmed crates.io response body."""
import pytest


def make_body(name="serde", description="A generic serialization/deserialization framework", versions=None):
    if versions is None:
        versions = [
            {"id": 3, "num": "1.0.195", "yanked": False, "created_at": "2024-01-01T00:00:00Z",
             "license": "MIT OR Apache-2.0", "crate_size": 77000, "readme_path": "/api/v1/crates/serde/1.0.195/readme",
             "features": {"default": ["std"], "std": [], "derive": ["serde_derive"]}},
            {"id": 2, "num": "1.0.194", "yanked": True, "created_at": "2023-12-30T00:00:00Z",
             "license": "MIT OR Apache-2.0", "crate_size": 76800, "readme_path": "/api/v1/crates/serde/1.0.194/readme",
             "features": None},
            {"id": 1, "num": "1.0.0", "yanked": False, "created_at": "2017-04-20T00:00:00Z",
             "license": None, "crate_size": None, "readme_path": None, "features": {}},
        ]
    return {
        "crate": {
            "id": name,
            "name": name,
            "description": description,
            "downloads": 300000000,
            "recent_downloads": 40000000,
            "homepage": "https://serde.rs",
            "documentation": None,
            "repository": "https://github.com/serde-rs/serde",
            "max_version": "1.0.195",
            "max_stable_version": "1.0.195",
            "newest_version": "1.0.195",
            "exact_match": False,
            "categories": ["encoding"],
            "keywords": ["serde", "serialization"],
            "versions": [3, 2, 1],
            "created_at": "2014-12-05T20:20:39Z",
            "updated_at": "2024-01-01T00:00:00Z",
            "links": {"owners": "/api/v1/crates/serde/owners"},
        },
        "versions": versions,
        "keywords": [
            {"id": "serde", "keyword": "serde", "crates_cnt": 1500, "created_at": "2015-01-01T00:00:00Z"},
            None,
        ],
        "categories": [
            {"id": "encoding", "category": "Encoding", "slug": "encoding", "description": "Encoding and/or decoding data.",
             "crates_cnt": 2000, "created_at": "2017-01-17T19:13:05Z"},
        ],
    }


@pytest.fixture
def crate_body():
    return make_body()
