"""Typed views over the Dropbox sharing responses the uploader reads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from artifact_uploader.errors import MissingFieldError

PUBLIC = "public"


def _object(value: object, name: str) -> Dict[str, object]:
    # null decodes as an empty object
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise MissingFieldError(name, value)
    return value


def _string(data: Dict[str, object], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MissingFieldError(key, data)
    return value


@dataclass(frozen=True)
class SharedLink:
    id: str
    name: str
    url: str
    path_lower: str
    visibility: str

    @property
    def is_public(self) -> bool:
        return self.visibility == PUBLIC

    @classmethod
    def from_json(cls, data: object) -> "SharedLink":
        data = _object(data, "links[]")
        permissions = _object(data.get("link_permissions"), "link_permissions")
        resolved = _object(permissions.get("resolved_visibility"), "resolved_visibility")
        return cls(
            id=_string(data, "id"),
            name=_string(data, "name"),
            url=_string(data, "url"),
            path_lower=_string(data, "path_lower"),
            visibility=_string(resolved, ".tag"),
        )


@dataclass(frozen=True)
class ListSharedLinksResult:
    links: List[SharedLink] = field(default_factory=list)

    def first_public(self) -> Optional[SharedLink]:
        for link in self.links:
            if link.is_public:
                return link
        return None

    @classmethod
    def from_json(cls, data: object) -> "ListSharedLinksResult":
        if not isinstance(data, dict):
            raise MissingFieldError("links", data)
        entries = data.get("links") or []
        if not isinstance(entries, list):
            raise MissingFieldError("links", data)
        return cls(links=[SharedLink.from_json(entry) for entry in entries])


@dataclass(frozen=True)
class CreatedSharedLink:
    url: str

    @classmethod
    def from_json(cls, data: object) -> "CreatedSharedLink":
        url = data.get("url") if isinstance(data, dict) else None
        if not isinstance(url, str):
            raise MissingFieldError("url", data)
        return cls(url=url)
