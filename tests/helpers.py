from datetime import datetime, timezone

from models import StarRecord


def make_payload(full_name, **overrides):
    """One element of the /starred payload, trimmed to the fields hoshi reads."""
    owner, name = full_name.split("/")
    repo = {
        "id": abs(hash(full_name)) % 100000,
        "node_id": "MDEwOlJlcG9zaXRvcnkx",
        "name": name,
        "full_name": full_name,
        "owner": {"login": owner, "id": 1},
        "html_url": f"https://github.com/{full_name}",
        "description": f"{name} description",
        "homepage": None,
        "language": "Python",
        "license": {"key": "mit", "name": "MIT License"},
        "stargazers_count": 42,
        "created_at": "2019-05-01T10:00:00Z",
        "updated_at": "2021-05-01T10:00:00Z",
    }
    repo.update(overrides)
    return repo


def make_star(full_name, created=(2019, 1, 1), updated=(2021, 1, 1), **overrides):
    owner, name = full_name.split("/")
    fields = dict(
        id=abs(hash(full_name)) % 100000,
        name=name,
        full_name=full_name,
        owner=owner,
        html_url=f"https://github.com/{full_name}",
        description="",
        homepage="",
        language="Go",
        license=None,
        stargazers_count=1,
        created_at=datetime(*created, tzinfo=timezone.utc),
        updated_at=datetime(*updated, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return StarRecord(**fields)
