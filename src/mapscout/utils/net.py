# MapScout — Networking utilities (requests session with retries)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


def build_session(user_agent: str, retries: int = 0, backoff: float = 0.5) -> requests.Session:
	"""Build a requests Session with an identifying User-Agent and Retry.

	Exhausted retries hand the last response back instead of raising, so callers
	see a plain non-2xx status and decide for themselves.
	"""
	s = requests.Session()
	s.headers.update(
		{
			"User-Agent": user_agent,
			"Accept": "application/xml,text/xml;q=0.9,text/plain;q=0.8,*/*;q=0.5",
		}
	)
	retry = Retry(
		total=max(0, int(retries)),
		backoff_factor=backoff,
		status_forcelist=(429, 500, 502, 503, 504),
		allowed_methods=frozenset({"GET", "HEAD"}),
		raise_on_status=False,
	)
	adapter = HTTPAdapter(max_retries=retry)
	s.mount("http://", adapter)
	s.mount("https://", adapter)
	return s


def ensure_success(response) -> None:
	"""Raise requests.HTTPError for any final status outside 2xx.

	raise_for_status() alone lets a 3xx that was not followed through.
	"""
	response.raise_for_status()
	if not 200 <= response.status_code < 300:
		raise requests.HTTPError(f"{response.status_code} for {response.url}", response=response)
