# MapScout — Sitemap crawl route
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...core.crawl import SitemapCrawler
from ...utils.urls import site_base


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/crawl-sitemap")
def crawl_sitemap(request: Request, url: Optional[str] = None):
	"""Crawl a site's sitemaps and return the filtered page URLs."""
	if not url:
		return JSONResponse({"error": "URL is required"}, status_code=400)
	try:
		site_base(url)
	except ValueError as e:
		return JSONResponse({"error": str(e)}, status_code=400)

	state = request.app.state
	session = state.session_factory()
	try:
		result = SitemapCrawler(session, state.settings.crawl_options()).crawl(url)
	except Exception as e:
		logger.exception("Sitemap crawl failed for %s", url)
		return JSONResponse({"success": False, "error": str(e)}, status_code=500)
	finally:
		session.close()
	return {"success": True, **result.to_dict()}
