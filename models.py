"""
Data model for starred repositories returned by the GitHub API.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


def _parse_timestamp(value: str) -> datetime:
    # GitHub sends UTC timestamps such as 2020-01-02T03:04:05Z
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class StarRecord:
    """One starred repository, as fetched once per run."""

    id: int
    name: str
    full_name: str
    owner: str
    html_url: str
    description: str
    homepage: str
    language: str
    license: Optional[str]
    stargazers_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StarRecord":
        """
        Build a record from one element of the /starred payload.

        Unknown fields are ignored. Raises KeyError, TypeError or ValueError
        when a required field is missing or malformed.
        """
        license_info = data.get("license") or {}
        return cls(
            id=data["id"],
            name=data["name"],
            full_name=data["full_name"],
            owner=data["owner"]["login"],
            html_url=data["html_url"],
            description=data.get("description") or "",
            homepage=data.get("homepage") or "",
            language=data.get("language") or "",
            license=license_info.get("name"),
            stargazers_count=data.get("stargazers_count") or 0,
            created_at=_parse_timestamp(data["created_at"]),
            updated_at=_parse_timestamp(data["updated_at"]),
        )
