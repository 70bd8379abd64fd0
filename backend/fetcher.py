"""Page fetcher: normalize a user-entered URL and download its raw HTML.

Tries a direct request first, then each raw-HTML CORS proxy in order.
The first successful response wins. Settings come from the environment
(optionally a .env file in the backend root):

FETCH_TIMEOUT_SECONDS=12
FETCH_USER_AGENT=...
FETCH_USE_PROXIES=1
"""

import logging
import os
from pathlib import Path
from urllib.parse import quote, urlparse

import requests
from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

logger = logging.getLogger(__name__)

FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", "12"))
FETCH_USER_AGENT = os.getenv(
    "FETCH_USER_AGENT",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36",
)
FETCH_USE_PROXIES = os.getenv("FETCH_USE_PROXIES", "1").strip().lower() not in {
    "0",
    "false",
    "no",
    "off",
}

_REQUEST_HEADERS = {
    "User-Agent": FETCH_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

# Proxies that return the raw HTML (not extracted text).
CORS_PROXIES = [
    lambda url: f"https://api.allorigins.win/raw?url={quote(url, safe='')}",
    lambda url: f"https://cors.isomorphic-git.org/{url}",
]

FETCH_ERROR_MESSAGE = "Unable to fetch page HTML (CORS/network)"


class RetrievalError(Exception):
    """The page HTML could not be obtained by any strategy."""


def normalize_url(raw: str) -> str | None:
    """
    Return an absolute http(s) URL for user input such as `example.com/page`,
    or None when the input cannot be made into one.
    """
    value = (raw or "").strip()
    if not value:
        return None
    if "://" not in value:
        value = f"https://{value}"
    try:
        parsed = urlparse(value)
        host = parsed.hostname
    except ValueError:
        return None
    if parsed.scheme not in ("http", "https") or not host:
        return None
    return parsed.geturl() if parsed.path else parsed._replace(path="/").geturl()


def _attempts(url: str) -> list[str]:
    targets = [url]
    if FETCH_USE_PROXIES:
        targets.extend(wrap(url) for wrap in CORS_PROXIES)
    return targets


def fetch_document(url: str) -> str:
    """
    Download the HTML at `url`.
    Raises RetrievalError when the direct request and every proxy fail.
    """
    for target in _attempts(url):
        try:
            response = requests.get(target, timeout=FETCH_TIMEOUT_SECONDS, headers=_REQUEST_HEADERS)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Fetch attempt failed: target=%s error=%s", target, exc)
            continue
        response.encoding = response.apparent_encoding or "utf-8"
        logger.info("Fetched %s via %s (%d bytes)", url, target, len(response.content))
        return response.text

    raise RetrievalError(FETCH_ERROR_MESSAGE)
