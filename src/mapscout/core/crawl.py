# MapScout — Core crawler (robots discovery, sitemap resolution, aggregation)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

from .aggregate import CrawlResult, aggregate
from .robots import SitemapReference, locate_sitemaps
from .session import FetchBudget
from .sitemap import ElementTreeLocExtractor, RegexLocExtractor, SitemapResolver


logger = logging.getLogger(__name__)


class CrawlOptions:
	def __init__(
		self,
		max_depth: int = 3,
		timeout: float = 10.0,
		workers: int = 4,
		max_sitemaps: int = 500,
		max_urls: int = 50000,
		strict_xml: bool = False,
	):
		self.max_depth = max(0, int(max_depth))
		self.timeout = max(0.1, float(timeout))
		self.workers = max(1, int(workers))
		self.max_sitemaps = max(0, int(max_sitemaps))
		self.max_urls = max(0, int(max_urls))
		self.strict_xml = strict_xml


class SitemapCrawler:
	"""Discover a site's sitemaps and collect the page URLs they list."""

	def __init__(self, session, options: Optional[CrawlOptions] = None) -> None:
		self.session = session
		self.options = options or CrawlOptions()

	def _resolver(self, budget: FetchBudget, stop_flag: Optional[Callable[[], bool]]) -> SitemapResolver:
		extractor = ElementTreeLocExtractor() if self.options.strict_xml else RegexLocExtractor()
		return SitemapResolver(
			self.session,
			extractor=extractor,
			max_depth=self.options.max_depth,
			timeout=self.options.timeout,
			budget=budget,
			stop_flag=stop_flag,
		)

	def resolve_all(
		self,
		refs: List[SitemapReference],
		stop_flag: Optional[Callable[[], bool]] = None,
	) -> Tuple[List[str], List[str]]:
		"""Resolve every candidate independently and concatenate in candidate order.

		Returns the discovered URLs and the candidates actually fetched, in candidate order.
		"""
		budget = FetchBudget(self.options.max_sitemaps, self.options.max_urls)
		resolver = self._resolver(budget, stop_flag)
		urls = [ref.url for ref in refs]
		if self.options.workers == 1 or len(urls) <= 1:
			batches = [resolver.resolve(u) for u in urls]
		else:
			with ThreadPoolExecutor(max_workers=min(self.options.workers, len(urls))) as pool:
				# map() yields in submission order, not completion order
				batches = list(pool.map(resolver.resolve, urls))
		discovered: List[str] = []
		for u, batch in zip(urls, batches):
			logger.debug("%s: %d url(s)", u, len(batch))
			discovered.extend(batch)
		attempted = [u for u in urls if u in resolver.attempted]
		return discovered, attempted

	def crawl(self, root_url: str, stop_flag: Optional[Callable[[], bool]] = None) -> CrawlResult:
		refs = locate_sitemaps(self.session, root_url, timeout=self.options.timeout, stop_flag=stop_flag)
		discovered, attempted = self.resolve_all(refs, stop_flag=stop_flag)
		res = aggregate(discovered, attempted)
		logger.info(
			"Crawled %s: %d sitemap(s), %d url(s) found, %d kept",
			root_url, len(attempted), res.total_urls, res.filtered_urls,
		)
		return res
