"""High-level API for library usage of ai_release_notes."""

from pathlib import Path

from .ai import get_ai_provider
from .core.config import DEFAULT_MODEL, DEFAULT_PROVIDER, AIConfig, GitHubConfig, ReleaseNotesConfig
from .core.interfaces import NullProgressReporter, ProgressEvent, ProgressReporter
from .exceptions import ValidationError
from .generator import assemble, simple_notes
from .git import get_commits
from .github_client import GitHubClient
from .models import Commit, Release, ReleaseDescriptor
from .publisher import ReleasePublisher


class ReleaseNotesClient:
	"""High-level client for generating and publishing release notes."""

	def __init__(
		self,
		config: ReleaseNotesConfig,
		progress_reporter: ProgressReporter | None = None,
	):
		self.config = config
		self.progress_reporter = progress_reporter or NullProgressReporter()

	def get_commits(self, tag: str, previous_tag: str | None = None) -> list[Commit]:
		"""Return the commits of a release, newest first.

		Args:
			tag: Git tag for the release
			previous_tag: Lower boundary. Auto-detected if not given.
		"""
		return get_commits(tag, previous_tag, progress_reporter=self.progress_reporter)

	def generate_release_notes(self, commits: list[Commit]) -> str:
		"""Generate release notes for the given commits.

		Uses the configured AI provider, or plain commit subjects if AI is disabled.

		Returns:
			Release notes as markdown
		"""
		if not self.config.ai.enabled:
			return simple_notes(commits)

		provider = get_ai_provider(self.config.ai.provider, self.config.ai)
		return assemble(commits, provider, self.config.get_instructions())

	def publish_release(
		self,
		tag: str,
		notes: str,
		name: str | None = None,
		draft: bool = False,
		prerelease: bool | None = None,
	) -> Release:
		"""Create or update the GitHub release for a tag.

		Args:
			tag: Git tag for the release
			notes: Release notes content
			name: Release title, defaults to the tag
			draft: Whether the release is a draft
			prerelease: Whether the release is a prerelease. Detected from the tag if None.
		"""
		if not self.config.github.token:
			raise ValidationError("GitHub token is required")

		descriptor = ReleaseDescriptor(
			repository=self.config.github.get_repository(),
			tag=tag,
			body=notes,
			name=name,
			draft=draft,
			prerelease=prerelease,
		)
		release = self.get_publisher().publish(descriptor)
		self.progress_reporter.report(
			ProgressEvent(
				type="success",
				message="Release created successfully!",
				metadata={"html_url": release.html_url},
			)
		)
		return release

	def get_publisher(self) -> ReleasePublisher:
		return ReleasePublisher(GitHubClient(self.config.github.token), self.progress_reporter)


class ReleaseNotesBuilder:
	"""Builder pattern for constructing ReleaseNotesClient."""

	def __init__(self):
		self._github_token = None
		self._repository = None
		self._provider = DEFAULT_PROVIDER
		self._api_key = None
		self._model = DEFAULT_MODEL
		self._use_ai = True
		self._prompt_path = None
		self._dry_run = False
		self._progress_reporter = None

	def with_github(self, token: str | None = None, repository: str | None = None) -> "ReleaseNotesBuilder":
		"""Set GitHub token and repository (owner/repo)."""
		if token:
			self._github_token = token
		if repository:
			self._repository = repository
		return self

	def with_ai(
		self, api_key: str | None = None, model: str = DEFAULT_MODEL, provider: str = DEFAULT_PROVIDER
	) -> "ReleaseNotesBuilder":
		"""Set the text generation backend."""
		self._api_key = api_key
		self._model = model
		self._provider = provider
		return self

	def without_ai(self) -> "ReleaseNotesBuilder":
		"""List commit subjects instead of generating notes with AI."""
		self._use_ai = False
		return self

	def with_prompt_file(self, path: Path) -> "ReleaseNotesBuilder":
		"""Set custom prompt instructions file path."""
		self._prompt_path = path
		return self

	def with_dry_run(self, dry_run: bool = True) -> "ReleaseNotesBuilder":
		"""Generate notes without publishing; no GitHub token needed."""
		self._dry_run = dry_run
		return self

	def with_progress_reporter(self, reporter: ProgressReporter) -> "ReleaseNotesBuilder":
		"""Set custom progress reporter."""
		self._progress_reporter = reporter
		return self

	def build(self) -> ReleaseNotesClient:
		"""Build the client with configured options.

		Raises:
			ValidationError: If required configuration is missing
		"""
		config = ReleaseNotesConfig(
			github=GitHubConfig(token=self._github_token, repository=self._repository),
			ai=AIConfig(
				provider=self._provider,
				api_key=self._api_key,
				model=self._model,
				enabled=self._use_ai,
			),
			prompt_path=self._prompt_path,
			dry_run=self._dry_run,
		)
		config.validate()

		return ReleaseNotesClient(config, self._progress_reporter)
