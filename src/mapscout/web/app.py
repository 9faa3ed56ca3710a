# MapScout — FastAPI application
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Callable, Optional

from fastapi import FastAPI

from ..config import Settings
from ..core.session import make_session


API_VERSION = "0.1.0"

ENDPOINTS = [
	{
		"path": "/api/crawl-sitemap",
		"method": "GET",
		"description": "Discover a site's sitemaps and list the page URLs they contain",
		"params": "url (required)",
	},
	{
		"path": "/api/check-url",
		"method": "GET",
		"description": "Check the HTTP status code of a URL",
		"params": "url (required)",
	},
]


def create_app(settings: Optional[Settings] = None, session_factory: Optional[Callable] = None) -> FastAPI:
	"""Create and configure the FastAPI application.

	session_factory builds one HTTP session per request; tests inject fakes here.
	"""
	cfg = settings or Settings()
	app = FastAPI(
		title="MapScout",
		description="Sitemap discovery and URL tools",
		version=API_VERSION,
	)
	app.state.settings = cfg
	app.state.session_factory = session_factory or (
		lambda: make_session(user_agent=cfg.user_agent, retries=cfg.retries, backoff=cfg.backoff)
	)

	from .routes import sitemap, tools

	app.include_router(sitemap.router, prefix="/api", tags=["Sitemap"])
	app.include_router(tools.router, prefix="/api", tags=["Tools"])

	@app.get("/api")
	def api_index():
		"""List the available endpoints."""
		return {
			"message": "MapScout API - Documentation",
			"version": API_VERSION,
			"endpoints": ENDPOINTS,
		}

	return app


def run_server(host: str = "127.0.0.1", port: int = 8000, settings: Optional[Settings] = None) -> None:
	"""Run the web server."""
	import uvicorn

	app = create_app(settings=settings)
	uvicorn.run(app, host=host, port=port)
