# MapScout — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import json
import typer
from typing import Optional
from rich import print

from .config import Settings
from .core.crawl import SitemapCrawler
from .core.session import make_session
from .core.status import check_url
from .logging_config import configure_logging

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def crawl(
	url: str = typer.Argument(..., help="Site root URL"),
	depth: int = typer.Option(None, help="Max nested sitemap-index depth (overrides env)"),
	timeout: float = typer.Option(None, help="Per-request timeout (seconds)"),
	workers: int = typer.Option(None, help="Sitemaps resolved in parallel"),
	max_sitemaps: int = typer.Option(None, help="Cap on sitemap documents fetched"),
	max_urls: int = typer.Option(None, help="Cap on URLs collected"),
	strict_xml: bool = typer.Option(None, help="Parse sitemaps as strict XML"),
	user_agent: Optional[str] = typer.Option(None, help="Override User-Agent"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
	output: Optional[str] = typer.Option(None, help="Write the full JSON result to this file"),
):
	"""Discover a site's sitemaps and list the page URLs they contain."""
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=cfg.log_dir)
	opt = cfg.crawl_options()
	if depth is not None:
		opt.max_depth = max(0, depth)
	if timeout is not None:
		opt.timeout = max(0.1, timeout)
	if workers is not None:
		opt.workers = max(1, workers)
	if max_sitemaps is not None:
		opt.max_sitemaps = max(0, max_sitemaps)
	if max_urls is not None:
		opt.max_urls = max(0, max_urls)
	if strict_xml is not None:
		opt.strict_xml = strict_xml

	session = make_session(user_agent=user_agent or cfg.user_agent, retries=cfg.retries, backoff=cfg.backoff)
	try:
		res = SitemapCrawler(session, opt).crawl(url)
	except ValueError as e:
		print(f"[red]{e}[/red]")
		raise typer.Exit(code=2)
	finally:
		session.close()

	print(f"[bold]Crawled:[/bold] {url}")
	print({
		"sitemaps": res.sitemaps,
		"total_urls": res.total_urls,
		"filtered_urls": res.filtered_urls,
	})
	if output:
		with open(output, "w", encoding="utf-8") as f:
			json.dump({"success": True, **res.to_dict()}, f, indent=2, ensure_ascii=False)
		print(f"Wrote {output}")


@app.command()
def check(url: str = typer.Argument(..., help="URL to probe")):
	"""HEAD a URL and print its final status."""
	cfg = Settings()
	session = make_session(user_agent=cfg.user_agent, retries=cfg.retries, backoff=cfg.backoff)
	try:
		print(check_url(session, url, timeout=cfg.timeout))
	finally:
		session.close()


@app.command()
def serve(
	host: Optional[str] = typer.Option(None, help="Bind address"),
	port: Optional[int] = typer.Option(None, help="Bind port"),
):
	"""Run the HTTP API under uvicorn."""
	from .web.app import run_server

	cfg = Settings()
	configure_logging(level=cfg.log_level, log_dir=cfg.log_dir)
	run_server(host=host or cfg.host, port=port or cfg.port, settings=cfg)


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
