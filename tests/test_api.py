import pytest
import requests
from urllib3.exceptions import LocationParseError
from fastapi.testclient import TestClient

from mapscout.config import Settings
from mapscout.web.app import create_app
from fakes import MockSession, sitemapindex, urlset


@pytest.fixture
def sessions():
	return []


@pytest.fixture
def mapping():
	return {
		"https://e.com/robots.txt": "Sitemap: https://e.com/s.xml",
		"https://e.com/s.xml": urlset("https://e.com/a", "https://e.com/a", "https://e.com/feed", "https://e.com/img.png"),
	}


@pytest.fixture
def client(sessions, mapping):
	def factory():
		s = MockSession(mapping)
		sessions.append(s)
		return s

	return TestClient(create_app(settings=Settings(workers=1), session_factory=factory))


def test_crawl_sitemap_success(client, sessions):
	r = client.get("/api/crawl-sitemap", params={"url": "https://e.com/"})
	assert r.status_code == 200
	assert r.json() == {
		"success": True,
		"sitemaps": ["https://e.com/s.xml"],
		"totalUrls": 4,
		"filteredUrls": 1,
		"urls": ["https://e.com/a"],
	}
	assert sessions[0].closed


@pytest.mark.parametrize("query", [{}, {"url": ""}])
def test_missing_url_is_400_without_network(client, sessions, query):
	r = client.get("/api/crawl-sitemap", params=query)
	assert r.status_code == 400
	assert r.json() == {"error": "URL is required"}
	assert sessions == []


def test_invalid_url_is_400_without_network(client, sessions):
	r = client.get("/api/crawl-sitemap", params={"url": "not a url"})
	assert r.status_code == 400
	assert "error" in r.json()
	assert sessions == []


def test_unexpected_failure_is_500():
	class Exploding(MockSession):
		def get(self, url, timeout=None, allow_redirects=True, **kwargs):
			raise RuntimeError("boom")

	app = create_app(settings=Settings(workers=1), session_factory=Exploding)
	r = TestClient(app).get("/api/crawl-sitemap", params={"url": "https://e.com"})
	assert r.status_code == 500
	assert r.json() == {"success": False, "error": "boom"}


def test_check_url(client, mapping):
	mapping["https://e.com/page"] = "ok"
	r = client.get("/api/check-url", params={"url": "https://e.com/page"})
	assert r.json() == {"status": 200, "statusText": "OK", "url": "https://e.com/page"}


def test_check_url_connection_failure(client, mapping):
	mapping["https://down.example"] = requests.ConnectionError("refused")
	r = client.get("/api/check-url", params={"url": "https://down.example"})
	assert r.status_code == 200
	body = r.json()
	assert body["status"] == 0
	assert body["statusText"] == "Connection failed"
	assert "refused" in body["error"]


def test_check_url_requires_url(client):
	r = client.get("/api/check-url")
	assert r.status_code == 400
	assert r.json() == {"error": "URL is required"}


def test_api_index(client):
	body = client.get("/api").json()
	assert {e["path"] for e in body["endpoints"]} == {"/api/crawl-sitemap", "/api/check-url"}


def test_unparseable_nested_url_still_200():
	bad = "http://" + "a" * 64 + ".example.com/s.xml"
	mapping = {
		"https://e.com/robots.txt": "Sitemap: https://e.com/index.xml",
		"https://e.com/index.xml": sitemapindex("https://e.com/ok.xml", bad),
		"https://e.com/ok.xml": urlset("https://e.com/a"),
		bad: LocationParseError("a" * 64 + ".example.com"),
	}
	app = create_app(settings=Settings(workers=1), session_factory=lambda: MockSession(mapping))
	r = TestClient(app).get("/api/crawl-sitemap", params={"url": "https://e.com"})
	assert r.status_code == 200
	assert r.json()["urls"] == ["https://e.com/a"]
