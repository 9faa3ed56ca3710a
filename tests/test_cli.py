import json

import pytest
from typer.testing import CliRunner

from mapscout import cli
from fakes import MockSession, urlset


runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
	monkeypatch.setenv("MAPSCOUT_LOG_DIR", str(tmp_path / "logs"))
	monkeypatch.setattr(
		cli,
		"make_session",
		lambda **kw: MockSession({
			"https://e.com/robots.txt": "Sitemap: https://e.com/s.xml",
			"https://e.com/s.xml": urlset("https://e.com/a", "https://e.com/author/me/"),
			"https://e.com/a": "ok",
		}),
	)


def test_crawl_writes_json(tmp_path):
	out = tmp_path / "result.json"
	r = runner.invoke(cli.app, ["crawl", "https://e.com", "--workers", "1", "--output", str(out)])
	assert r.exit_code == 0, r.output
	data = json.loads(out.read_text(encoding="utf-8"))
	assert data["success"] is True
	assert data["urls"] == ["https://e.com/a"]
	assert data["totalUrls"] == 2


def test_crawl_rejects_relative_url():
	r = runner.invoke(cli.app, ["crawl", "e.com"])
	assert r.exit_code == 2


def test_check():
	r = runner.invoke(cli.app, ["check", "https://e.com/a"])
	assert r.exit_code == 0
	assert "200" in r.output


def test_print_config(monkeypatch):
	monkeypatch.setenv("MAPSCOUT_MAX_DEPTH", "5")
	r = runner.invoke(cli.app, ["print-config"])
	assert r.exit_code == 0
	assert "'max_depth': 5" in r.output
