# MapScout — HTTP session and per-crawl fetch budget
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import threading
import requests
from ..utils.net import build_session


logger = logging.getLogger(__name__)


class FetchBudget:
	"""Global caps on sitemap documents fetched and URLs collected in one crawl.

	Thread-safe; shared by every resolver working on the same crawl.
	"""

	def __init__(self, max_documents: int, max_urls: int) -> None:
		self._lock = threading.Lock()
		self.max_documents = max(0, int(max_documents))
		self.max_urls = max(0, int(max_urls))
		self.documents = 0
		self.urls = 0
		self._warned = False

	def claim_document(self) -> bool:
		with self._lock:
			if self.documents >= self.max_documents:
				self._warn_once("sitemap document limit reached (%d)", self.max_documents)
				return False
			self.documents += 1
			return True

	def claim_urls(self, count: int) -> int:
		"""Reserve up to count URL slots and return how many were granted."""
		with self._lock:
			granted = max(0, min(count, self.max_urls - self.urls))
			self.urls += granted
			if granted < count:
				self._warn_once("URL limit reached (%d); truncating", self.max_urls)
			return granted

	def _warn_once(self, msg: str, *args) -> None:
		# caller holds the lock
		if not self._warned:
			self._warned = True
			logger.warning(msg, *args)


def make_session(user_agent: str, retries: int = 0, backoff: float = 0.5) -> requests.Session:
	return build_session(user_agent=user_agent, retries=retries, backoff=backoff)
