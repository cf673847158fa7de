"""
Ping IndexNow for the calculator pages.

Search engines that support IndexNow re-crawl a URL soon after it is
submitted. Run this after a calculator table changes so the updated pages
get picked up:

    INDEXNOW_KEY=<key> python scripts/notify_indexnow.py            # every calculator
    INDEXNOW_KEY=<key> python scripts/notify_indexnow.py weighted   # one calculator
"""

import logging
import os
import sys
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from gpa_tools.config import LOG_LEVEL, SITE_URL
from gpa_tools.data import DataLoader

logger = logging.getLogger(__name__)

# --- CONFIGURATION ---
INDEXNOW_ENDPOINT = "https://api.indexnow.org/indexnow"
INDEXNOW_KEY = os.environ.get("INDEXNOW_KEY", "")
REQUEST_TIMEOUT = 10
# ---------------------


def create_retry_session():
    session = requests.Session()
    retries = Retry(
        total=3,
        backoff_factor=1,
        status_forcelist=[429, 500, 502, 503, 504],
        # A resubmitted URL list is harmless
        allowed_methods=["POST"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.headers.update({"Content-Type": "application/json; charset=utf-8"})
    return session


class IndexNowNotifier:
    """
    Submits page URLs to IndexNow, at most once per URL per run.

    A failed submission is logged and reported as False; it never raises,
    because a missed ping only delays re-crawling.
    """

    def __init__(self, key: str = INDEXNOW_KEY, site_url: str = SITE_URL, session=None):
        self.key = key
        self.site_url = site_url.rstrip("/")
        self.host = urlparse(self.site_url).netloc
        self.session = session or create_retry_session()
        self.notified = set()

    def full_url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.site_url}/{path.lstrip('/')}"

    def notify(self, path: str) -> bool:
        url = self.full_url(path)
        if url in self.notified:
            logger.debug("Already notified %s", url)
            return False
        if not self.key:
            logger.warning("INDEXNOW_KEY is not set, skipping %s", url)
            return False

        payload = {
            "host": self.host,
            "key": self.key,
            "keyLocation": f"{self.site_url}/{self.key}.txt",
            "urlList": [url],
        }
        try:
            resp = self.session.post(INDEXNOW_ENDPOINT, json=payload, timeout=REQUEST_TIMEOUT)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("IndexNow notification failed for %s: %s", url, e)
            return False

        self.notified.add(url)
        logger.info("IndexNow notified: %s", url)
        return True

    def notify_calculators(self, loader: DataLoader, keys=None) -> dict:
        """Notify every calculator page (or just `keys`); returns {url: submitted}."""
        keys = keys or [key for key, _title in loader.list_calculators()]
        results = {}
        for key in keys:
            path = loader.definition(key).path
            if not path:
                continue
            url = self.full_url(path)
            # Several calculators can share one page
            if url in results:
                continue
            results[url] = self.notify(path)
        return results


def run(argv=None):
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.WARNING))
    argv = sys.argv[1:] if argv is None else argv

    notifier = IndexNowNotifier()
    results = notifier.notify_calculators(DataLoader(), argv or None)

    sent = sum(1 for ok in results.values() if ok)
    print(f"✅ Submitted {sent}/{len(results)} calculator page(s) to IndexNow")
    for url, ok in results.items():
        print(f"  {'✓' if ok else '✗'} {url}")
    return results


if __name__ == "__main__":
    run()
