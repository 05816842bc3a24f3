"""
GitHub API client for fetching starred repositories.
"""

import requests
from config import get_api_url, get_http_timeout, logger
from errors import RetrievalCancelled, RetrievalError
from models import StarRecord

HEADERS = {"Accept": "application/vnd.github.v3+json"}


def fetch_stars_page(username, page, token=None, session=None):
    """
    Fetch one page of a user's starred repositories.

    Args:
        username (str): The GitHub username.
        page (int): 1-based page number.
        token (str, optional): GitHub Personal Access Token for higher rate limits.
        session (requests.Session, optional): Session reused across pages.

    Returns:
        list: StarRecord objects in API order. An empty list means there are no more pages.

    Raises:
        RetrievalError: On any transport, HTTP or decoding failure.
    """
    headers = dict(HEADERS)
    if token:
        headers["Authorization"] = f"token {token}"

    url = f"{get_api_url()}/users/{username}/starred?page={page}"
    http = session or requests
    logger.info(f"Fetching GitHub stars for {username} - Page {page}")
    try:
        response = http.get(url, headers=headers, timeout=get_http_timeout())
    except requests.RequestException as e:
        raise RetrievalError(f"Network error fetching page {page}: {e}") from e

    if response.status_code != 200:
        raise RetrievalError(
            f"GitHub API Error on page {page}: {response.status_code} - {response.text}"
        )

    try:
        data = response.json()
    except ValueError as e:
        raise RetrievalError(f"Page {page} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise RetrievalError(f"Page {page} is not a list of repositories")

    try:
        return [StarRecord.from_dict(repo) for repo in data]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise RetrievalError(f"Malformed repository on page {page}: {e!r}") from e


def fetch_all_stars(username, token=None, fetch_page=fetch_stars_page, cancelled=None):
    """
    Fetch every starred repository, one page at a time.

    Pages are requested strictly in order; the first empty page ends the loop.
    `cancelled` is polled before each request and aborts retrieval when it
    returns True.
    """
    all_stars = []
    page = 1

    with requests.Session() as session:
        while True:
            if cancelled is not None and cancelled():
                raise RetrievalCancelled(f"Retrieval cancelled before page {page}")

            stars = fetch_page(username, page, token=token, session=session)
            if not stars:
                break

            all_stars.extend(stars)
            page += 1

    logger.info(f"Fetched {len(all_stars)} starred repositories for {username} in {page - 1} pages")
    return all_stars
