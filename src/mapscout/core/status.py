# MapScout — URL status probe (HEAD, redirects followed)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Any, Dict

import requests


logger = logging.getLogger(__name__)


def check_url(session, url: str, timeout: float = 10.0) -> Dict[str, Any]:
	"""HEAD a URL and report its final status; connection failures report status 0."""
	try:
		r = session.head(url, allow_redirects=True, timeout=timeout)
		return {"status": r.status_code, "statusText": r.reason or "", "url": r.url}
	except requests.RequestException as e:
		logger.info("HEAD %s failed: %s", url, e)
		return {"status": 0, "statusText": "Connection failed", "error": str(e)}
