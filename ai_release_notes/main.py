#!/usr/bin/env python
"""AI Release Notes CLI."""

from contextlib import contextmanager
from enum import Enum
from pathlib import Path

import typer

from .adapters.cli_progress import CLIProgressReporter
from .api import ReleaseNotesClient
from .core.config import DEFAULT_PROVIDER, ReleaseNotesConfig
from .core.config_loader import EnvConfigLoader, TomlConfigLoader, merge_configs
from .core.interfaces import ProgressEvent
from .exceptions import ReleaseNotesError, ValidationError
from .git import get_latest_tag
from .ui import CLI

app = typer.Typer(
	help="Generate AI-powered release notes for GitHub releases",
	invoke_without_command=True,
	no_args_is_help=True,
)


class PrereleaseMode(str, Enum):
	auto = "auto"
	yes = "yes"
	no = "no"

	def to_flag(self) -> bool | None:
		if self is PrereleaseMode.auto:
			return None
		return self is PrereleaseMode.yes


@app.callback()
def callback():
	"""Generate AI-powered release notes for GitHub releases."""
	pass


def load_config(config_path: Path | None = None, env_path: Path | str = ".env") -> ReleaseNotesConfig:
	"""Read the config file (if given), then the environment and .env file on top of it."""
	base = TomlConfigLoader(config_path).load() if config_path else ReleaseNotesConfig()
	return merge_configs(base, EnvConfigLoader(env_path).load())


@contextmanager
def exit_on_error(cli: CLI):
	"""Print pipeline errors and exit with status 1."""
	try:
		yield
	except (ReleaseNotesError, FileNotFoundError) as e:
		cli.show_error(f"Error: {e}")
		raise typer.Exit(code=1) from e


@app.command()
def generate(
	tag: str | None = typer.Option(None, "--tag", "-t", help="Git tag to generate release notes for"),
	latest: bool = typer.Option(False, "--latest", "-l", help="Use the most recent tag (auto-detected)"),
	repo: str | None = typer.Option(None, "--repo", "-r", help="Repository in format owner/repo [env: GITHUB_REPOSITORY]"),
	provider: str | None = typer.Option(None, "--provider", "-p", help=f"AI provider to use [default: {DEFAULT_PROVIDER}]"),
	api_key: str | None = typer.Option(None, "--api-key", help="API key for AI provider [env: OPENAI_API_KEY]"),
	model: str | None = typer.Option(None, "--model", help="AI model to use [env: OPENAI_MODEL]"),
	github_token: str | None = typer.Option(None, "--github-token", help="GitHub token for API access [env: GITHUB_TOKEN]"),
	dry_run: bool | None = typer.Option(None, "--dry-run/--no-dry-run", help="Generate notes without creating release"),
	previous_tag: str | None = typer.Option(
		None, "--previous-tag", help="Previous tag to compare against (auto-detected if not provided)"
	),
	use_ai: bool | None = typer.Option(
		None, "--ai/--no-ai", help="Ask an AI provider, or only list commit subjects with --no-ai"
	),
	name: str | None = typer.Option(None, "--name", help="Release title (defaults to the tag)"),
	draft: bool = typer.Option(False, "--draft", help="Create the release as a draft"),
	prerelease: PrereleaseMode = typer.Option(
		PrereleaseMode.auto, "--prerelease", help="Mark as prerelease; 'auto' detects alpha/beta/rc/pre tags"
	),
	prompt_path: Path | None = typer.Option(None, "--prompt-path", help="File with custom prompt instructions"),
	config_path: Path | None = typer.Option(None, "--config-path", help="Path to a TOML config file"),
):
	"""Generate release notes for a tag and publish them as a GitHub release.

	Values not given as options are read from the environment, a .env file
	or the file given with --config-path, in that order.
	"""
	cli = CLI()
	progress_reporter = CLIProgressReporter(cli)

	with exit_on_error(cli):
		config = load_config(config_path)

		# Override with CLI arguments
		if repo:
			config.github.repository = repo
		if github_token:
			config.github.token = github_token
		if api_key:
			config.ai.api_key = api_key
		if model:
			config.ai.model = model
		if prompt_path:
			config.prompt_path = prompt_path
		if provider is not None:
			config.ai.provider = provider
		if use_ai is not None:
			config.ai.enabled = use_ai
		if dry_run is not None:
			config.dry_run = dry_run

		config.validate()
		if not tag and not latest:
			raise ValidationError("Either --tag or --latest must be specified")

		progress_reporter.report(ProgressEvent(type="info", message="Starting AI Release Notes Generator...\n"))

		if latest:
			tag = get_latest_tag()
			progress_reporter.report(ProgressEvent(type="info", message=f"Auto-detected latest tag: {tag}\n"))

		client = ReleaseNotesClient(config, progress_reporter)

		progress_reporter.report(ProgressEvent(type="info", message=f"Fetching commits for tag: {tag}..."))
		commits = client.get_commits(tag, previous_tag)
		if not commits:
			progress_reporter.report(ProgressEvent(type="warning", message="No commits found since last tag"))
			return

		progress_reporter.report(ProgressEvent(type="info", message=f"   Found {len(commits)} commits\n"))

		if config.ai.enabled:
			progress_reporter.report(ProgressEvent(type="info", message="Generating release notes with AI..."))
		notes = client.generate_release_notes(commits)
		progress_reporter.report(
			ProgressEvent(type="release_notes", message=notes, metadata={"heading": "Generated Release Notes"})
		)

		if config.dry_run:
			progress_reporter.report(ProgressEvent(type="success", message="Dry run complete - no release created"))
			return

		progress_reporter.report(ProgressEvent(type="info", message="Creating GitHub release..."))
		client.publish_release(tag, notes, name=name, draft=draft, prerelease=prerelease.to_flag())


def _read_only_config(repo: str | None, github_token: str | None, config_path: Path | None) -> ReleaseNotesConfig:
	config = load_config(config_path)
	if repo:
		config.github.repository = repo
	if github_token:
		config.github.token = github_token

	config.github.get_repository()
	if not config.github.token:
		raise ValidationError("GitHub token must be provided via --github-token or GITHUB_TOKEN env var")

	return config


@app.command()
def show(
	tag: str,
	repo: str | None = typer.Option(None, "--repo", "-r", help="Repository in format owner/repo [env: GITHUB_REPOSITORY]"),
	github_token: str | None = typer.Option(None, "--github-token", help="GitHub token for API access [env: GITHUB_TOKEN]"),
	config_path: Path | None = typer.Option(None, "--config-path", help="Path to a TOML config file"),
):
	"""Show the release notes currently published for a tag."""
	cli = CLI()

	with exit_on_error(cli):
		config = _read_only_config(repo, github_token, config_path)
		publisher = ReleaseNotesClient(config).get_publisher()
		release = publisher.get_release(config.github.get_repository(), tag)

		if release is None:
			cli.show_warning(f"No release found for {tag}")
			return

		cli.show_release_notes(release.name or release.tag_name, release.body or "")
		if release.html_url:
			cli.show_text(release.html_url)


@app.command("list")
def list_releases(
	repo: str | None = typer.Option(None, "--repo", "-r", help="Repository in format owner/repo [env: GITHUB_REPOSITORY]"),
	github_token: str | None = typer.Option(None, "--github-token", help="GitHub token for API access [env: GITHUB_TOKEN]"),
	per_page: int = typer.Option(30, "--per-page", min=1, max=100, help="Number of releases to show"),
	config_path: Path | None = typer.Option(None, "--config-path", help="Path to a TOML config file"),
):
	"""List the most recent releases of a repository."""
	cli = CLI()

	with exit_on_error(cli):
		config = _read_only_config(repo, github_token, config_path)
		publisher = ReleaseNotesClient(config).get_publisher()
		releases = publisher.list_releases(config.github.get_repository(), per_page=per_page)

		if not releases:
			cli.show_warning("No releases found")
			return

		for release in releases:
			flags = [label for label, is_set in (("draft", release.draft), ("prerelease", release.prerelease)) if is_set]
			suffix = f" ({', '.join(flags)})" if flags else ""
			cli.show_text(f"{release.tag_name}\t{release.name or ''}{suffix}")


if __name__ == "__main__":
	app()
