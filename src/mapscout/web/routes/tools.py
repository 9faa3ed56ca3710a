# MapScout — URL status route
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...core.status import check_url


router = APIRouter()


@router.get("/check-url")
def check_url_status(request: Request, url: Optional[str] = None):
	"""Report the HTTP status of a URL after redirects."""
	if not url:
		return JSONResponse({"error": "URL is required"}, status_code=400)
	state = request.app.state
	session = state.session_factory()
	try:
		return check_url(session, url, timeout=state.settings.timeout)
	finally:
		session.close()
