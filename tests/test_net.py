import pytest
import requests

from mapscout.utils.net import build_session, ensure_success


def test_session_identifies_itself_and_does_not_retry_by_default():
	s = build_session(user_agent="MapScout-Test/1.0")
	assert s.headers["User-Agent"] == "MapScout-Test/1.0"
	retry = s.get_adapter("https://example.com").max_retries
	assert retry.total == 0
	assert "GET" in retry.allowed_methods


def test_session_retries_configurable():
	s = build_session(user_agent="x", retries=3, backoff=1.0)
	retry = s.get_adapter("http://example.com").max_retries
	assert retry.total == 3
	assert retry.backoff_factor == 1.0


@pytest.mark.parametrize("status", [300, 304, 404, 503])
def test_ensure_success_rejects_non_2xx(status):
	r = requests.Response()
	r.status_code = status
	r.url = "https://example.com/sitemap.xml"
	with pytest.raises(requests.HTTPError):
		ensure_success(r)


def test_ensure_success_accepts_2xx():
	r = requests.Response()
	r.status_code = 204
	ensure_success(r)
