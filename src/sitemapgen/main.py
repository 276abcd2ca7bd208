from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from sitemapgen.config import ConfigError, load_config
from sitemapgen.errors import SitemapError
from sitemapgen.notification import HttpxTransport
from sitemapgen.observability import bind_run_context, configure_logging, get_logger
from sitemapgen.sitemap import SitemapGenerator

if TYPE_CHECKING:
    from sitemapgen.config import SiteConfig
    from sitemapgen.notification import HttpTransport

logger = get_logger(__name__)

app = typer.Typer(add_completion=False)


@dataclass(frozen=True, slots=True)
class ApplicationComponents:
    config_path: Path
    config: SiteConfig
    generator: SitemapGenerator


def create_generator(config: SiteConfig, transport: HttpTransport | None = None) -> SitemapGenerator:
    generator = SitemapGenerator(config.base_url, transport=transport)
    generator.use_defaults(config.defaults.to_defaults())
    return generator.add_pages(page.to_entry() for page in config.pages)


def create_application(config_path: Path, transport: HttpTransport | None = None) -> ApplicationComponents:
    config = load_config(config_path)
    if transport is None and config.ping is not None:
        transport = HttpxTransport(timeout=config.ping.timeout_seconds)
    return ApplicationComponents(
        config_path=config_path,
        config=config,
        generator=create_generator(config, transport),
    )


def _resolve_output(config_path: Path, configured: Path, override: Path | None) -> Path:
    # command-line paths stay relative to the working directory
    if override is not None:
        return override
    if configured.is_absolute():
        return configured
    return config_path.parent / configured


def write_sitemap(components: ApplicationComponents, output: Path | None = None) -> Path:
    settings = components.config.output
    target = _resolve_output(components.config_path, settings.path, output)
    generator = components.generator
    if settings.gzip:
        return generator.to_gzip_file(target)
    return generator.to_file(target, pretty_indent=settings.pretty_indent)


def ping_search_engines(components: ApplicationComponents, sitemap_url: str | None = None) -> bool:
    ping_config = components.config.ping
    if ping_config is None:
        logger.info("ping_skipped", reason="no [ping] section in config")
        return True
    response = components.generator.ping(ping_config.to_ping(sitemap_url))
    return response.ok


@app.command()
def build(
    config: Annotated[Path, typer.Option("-c", "--config")],
    output: Annotated[Path | None, typer.Option("-o", "--output")] = None,
    ping: Annotated[bool, typer.Option("--ping/--no-ping")] = True,
    verbose: Annotated[bool, typer.Option("-v", "--verbose")] = False,
) -> None:
    configure_logging("DEBUG" if verbose else None)
    bind_run_context(command="build", config=str(config))
    try:
        components = create_application(config)
        write_sitemap(components, output)
        if ping and not ping_search_engines(components):
            raise typer.Exit(code=1)
    except (ConfigError, SitemapError, OSError) as exc:
        logger.error("build_failed", error=str(exc), error_type=type(exc).__name__)
        raise typer.Exit(code=1) from exc


@app.command(name="ping")
def ping_command(
    config: Annotated[Path, typer.Option("-c", "--config")],
    sitemap_url: Annotated[str | None, typer.Option("--sitemap-url")] = None,
    verbose: Annotated[bool, typer.Option("-v", "--verbose")] = False,
) -> None:
    configure_logging("DEBUG" if verbose else None)
    bind_run_context(command="ping", config=str(config))
    try:
        components = create_application(config)
        if not ping_search_engines(components, sitemap_url):
            raise typer.Exit(code=1)
    except (ConfigError, SitemapError) as exc:
        logger.error("ping_failed", error=str(exc), error_type=type(exc).__name__)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
