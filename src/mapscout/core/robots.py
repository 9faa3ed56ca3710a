# MapScout — robots.txt sitemap discovery with conventional fallbacks
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Callable, List, Optional

import requests

from ..utils.net import ensure_success
from ..utils.urls import join_base, site_base


logger = logging.getLogger(__name__)

SOURCE_ROBOTS = "robots"
SOURCE_FALLBACK = "fallback"

FALLBACK_PATHS = ("sitemap.xml", "sitemap_index.xml", "wp-sitemap.xml")


class SitemapReference:
	"""A candidate sitemap URL and where it came from."""

	def __init__(self, url: str, source: str) -> None:
		self.url = url
		self.source = source

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, SitemapReference):
			return NotImplemented
		return self.url == other.url and self.source == other.source

	def __repr__(self) -> str:
		return f"SitemapReference({self.url!r}, {self.source!r})"


def parse_sitemap_directives(text: str) -> List[str]:
	"""Return every `Sitemap:` value in robots.txt text, in file order."""
	sitemaps: List[str] = []
	for line in text.splitlines():
		line = line.strip()
		if line.lower().startswith("sitemap:"):
			sm = line.split(":", 1)[1].strip()
			if sm:
				sitemaps.append(sm)
	return sitemaps


def fallback_sitemaps(base_url: str) -> List[SitemapReference]:
	return [SitemapReference(join_base(base_url, p), SOURCE_FALLBACK) for p in FALLBACK_PATHS]


def locate_sitemaps(
	session,
	root_url: str,
	timeout: float = 10.0,
	stop_flag: Optional[Callable[[], bool]] = None,
) -> List[SitemapReference]:
	"""Fetch robots.txt once and list the sitemaps it declares.

	Falls back to the conventional sitemap paths when robots.txt is unreachable,
	returns a non-2xx status, or declares nothing. Fetch errors never propagate;
	an invalid root_url raises ValueError.
	"""
	base_url = site_base(root_url)
	robots_url = join_base(base_url, "robots.txt")
	declared: List[str] = []
	if not (stop_flag and stop_flag()):
		try:
			r = session.get(robots_url, timeout=timeout, allow_redirects=True)
			ensure_success(r)
			declared = parse_sitemap_directives(r.text)
		except (requests.RequestException, ValueError) as e:
			logger.info("robots.txt unavailable at %s: %s", robots_url, e)
	if declared:
		logger.debug("%d sitemap(s) declared in %s", len(declared), robots_url)
		return [SitemapReference(u, SOURCE_ROBOTS) for u in declared]
	logger.info("No sitemap declared for %s; trying conventional paths", base_url)
	return fallback_sitemaps(base_url)
