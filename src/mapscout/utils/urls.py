# MapScout — URL utilities: root validation and path joining
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from urllib.parse import urlparse


ALLOWED_SCHEMES = ("http", "https")


def is_absolute_url(url: str) -> bool:
	try:
		p = urlparse(url)
	except ValueError:
		return False
	return p.scheme.lower() in ALLOWED_SCHEMES and bool(p.netloc)


def site_base(url: str) -> str:
	"""Validate a site root URL and strip a single trailing slash.

	Raises ValueError for anything that is not an absolute http(s) URL.
	"""
	u = (url or "").strip()
	if not is_absolute_url(u):
		raise ValueError(f"Invalid URL: {url!r} is not an absolute http(s) URL")
	return u[:-1] if u.endswith("/") else u


def join_base(base_url: str, path: str) -> str:
	return f"{base_url}/{path.lstrip('/')}"


__all__ = [
	"is_absolute_url",
	"site_base",
	"join_base",
]
