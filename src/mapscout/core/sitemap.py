# MapScout — Sitemap fetching, classification and nested-index resolution
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import re
import threading
import xml.etree.ElementTree as ET
from typing import Callable, List, Optional, Set

import requests

from .session import FetchBudget
from ..utils.net import ensure_success


logger = logging.getLogger(__name__)

INDEX = "index"
URLSET = "urlset"


class LocExtractor:
	"""Pulls the text of every <loc> element out of a sitemap document."""

	def extract(self, text: str) -> List[str]:
		raise NotImplementedError


class RegexLocExtractor(LocExtractor):
	"""Matches <loc>...</loc> pairs on raw text.

	Tolerates broken or truncated XML: every well-formed pair still counts.
	"""

	LOC_RE = re.compile(r"<loc>([^<]+)</loc>")

	def extract(self, text: str) -> List[str]:
		out: List[str] = []
		for m in self.LOC_RE.finditer(text):
			u = m.group(1).strip()
			if u:
				out.append(u)
		return out


class ElementTreeLocExtractor(LocExtractor):
	"""Strict parser; a document that is not well-formed XML yields nothing."""

	def extract(self, text: str) -> List[str]:
		try:
			root = ET.fromstring(text)
		except ET.ParseError as e:
			logger.debug("XML parse error: %s", e)
			return []
		out: List[str] = []
		for loc in root.findall(".//{*}loc"):
			u = (loc.text or "").strip()
			if u:
				out.append(u)
		return out


def classify(text: str) -> Optional[str]:
	if "<sitemapindex" in text:
		return INDEX
	if "<urlset" in text:
		return URLSET
	return None


class SitemapResolver:
	"""Resolve a sitemap URL into page URLs, following nested indexes depth-first.

	Every failure (fetch error, non-2xx, unrecognized body, depth or budget
	exhausted) contributes an empty list and never touches sibling sitemaps.
	"""

	def __init__(
		self,
		session,
		extractor: Optional[LocExtractor] = None,
		max_depth: int = 3,
		timeout: float = 10.0,
		budget: Optional[FetchBudget] = None,
		stop_flag: Optional[Callable[[], bool]] = None,
	) -> None:
		self.session = session
		self.extractor = extractor or RegexLocExtractor()
		self.max_depth = max_depth
		self.timeout = timeout
		self.budget = budget
		self.stop_flag = stop_flag
		self.attempted: Set[str] = set()
		self._lock = threading.Lock()

	def fetch(self, url: str) -> Optional[str]:
		if self.stop_flag and self.stop_flag():
			return None
		if self.budget is not None and not self.budget.claim_document():
			return None
		with self._lock:
			self.attempted.add(url)
		try:
			r = self.session.get(url, timeout=self.timeout, allow_redirects=True)
			ensure_success(r)
			return r.text
		except (requests.RequestException, ValueError) as e:
			logger.info("Skipping sitemap %s: %s", url, e)
			return None

	def resolve(self, url: str, depth: int = 0) -> List[str]:
		if depth > self.max_depth:
			logger.debug("Max sitemap depth exceeded at %s", url)
			return []
		text = self.fetch(url)
		if text is None:
			return []
		kind = classify(text)
		if kind == INDEX:
			urls: List[str] = []
			for child in self.extractor.extract(text):
				urls.extend(self.resolve(child, depth + 1))
			return urls
		if kind == URLSET:
			urls = self.extractor.extract(text)
			if self.budget is not None:
				granted = self.budget.claim_urls(len(urls))
				urls = urls[:granted]
			return urls
		logger.info("Unrecognized sitemap format at %s", url)
		return []
