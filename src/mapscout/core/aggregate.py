# MapScout — Result aggregation: counts, dedup, non-content filtering
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from typing import Any, Dict, Iterable, List, Optional, Set


EXCLUDED_SUBSTRINGS = ("/feed", "wp-json", "/category/", "/tag/", "/author/")
EXCLUDED_EXTENSIONS = re.compile(r"\.(jpg|jpeg|png|gif|svg|webp|pdf|zip|mp4)$", re.IGNORECASE)


class CrawlResult:
	def __init__(
		self,
		sitemaps: Optional[List[str]] = None,
		total_urls: int = 0,
		urls: Optional[List[str]] = None,
	) -> None:
		self.sitemaps: List[str] = list(sitemaps or [])
		self.total_urls = total_urls
		self.urls: List[str] = list(urls or [])

	@property
	def filtered_urls(self) -> int:
		return len(self.urls)

	def to_dict(self) -> Dict[str, Any]:
		return {
			"sitemaps": self.sitemaps,
			"totalUrls": self.total_urls,
			"filteredUrls": self.filtered_urls,
			"urls": self.urls,
		}


def is_excluded(url: str) -> bool:
	"""True for feeds, API endpoints, taxonomy pages and binary assets."""
	if any(s in url for s in EXCLUDED_SUBSTRINGS):
		return True
	return EXCLUDED_EXTENSIONS.search(url) is not None


def aggregate(raw_urls: Iterable[str], sitemaps: Iterable[str] = ()) -> CrawlResult:
	"""Merge discovered URLs into a CrawlResult.

	total_urls counts every raw occurrence, duplicates included; urls keeps the
	first-seen order of unique, non-excluded entries.
	"""
	raw = list(raw_urls)
	seen: Set[str] = set()
	kept: List[str] = []
	for u in raw:
		if u in seen:
			continue
		seen.add(u)
		if not is_excluded(u):
			kept.append(u)
	return CrawlResult(sitemaps=list(sitemaps), total_urls=len(raw), urls=kept)
