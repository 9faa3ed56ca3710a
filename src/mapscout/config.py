# MapScout — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from .core.crawl import CrawlOptions


class Settings(BaseSettings):
	"""Application settings with sane defaults.

	Environment variables are prefixed with MAPSCOUT_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="MAPSCOUT_", env_file=".env", extra="ignore")

	user_agent: str = Field(default="Mozilla/5.0 (compatible; MapScout/0.1)")
	timeout: float = Field(default=10.0)
	max_depth: int = Field(default=3)
	workers: int = Field(default=4)
	max_sitemaps: int = Field(default=500)
	max_urls: int = Field(default=50000)
	strict_xml: bool = Field(default=False)
	retries: int = Field(default=0)
	backoff: float = Field(default=0.5)
	log_level: str = Field(default="INFO")
	log_dir: str = Field(default="logs")
	host: str = Field(default="127.0.0.1")
	port: int = Field(default=8000)

	def crawl_options(self) -> CrawlOptions:
		return CrawlOptions(
			max_depth=self.max_depth,
			timeout=self.timeout,
			workers=self.workers,
			max_sitemaps=self.max_sitemaps,
			max_urls=self.max_urls,
			strict_xml=self.strict_xml,
		)
