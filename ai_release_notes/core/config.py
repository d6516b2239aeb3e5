from dataclasses import dataclass, field
from pathlib import Path

from ..exceptions import ValidationError
from ..models import Repository

DEFAULT_PROVIDER = "openai"
DEFAULT_MODEL = "gpt-5-mini"


@dataclass
class GitHubConfig:
	token: str | None = field(default=None, repr=False)
	repository: str | None = None  # owner/repo

	def get_repository(self) -> Repository:
		if not self.repository:
			raise ValidationError("Repository must be specified via --repo or GITHUB_REPOSITORY env var")
		return Repository.from_string(self.repository)


@dataclass
class AIConfig:
	"""Text generation backend settings.

	Attributes:
		provider: Registry name of the backend, case-insensitive
		api_key: Credential for the backend. Never printed.
		model: Model identifier passed to the backend
		enabled: If False, release notes are built from commit subjects without any AI call
	"""

	provider: str = DEFAULT_PROVIDER
	api_key: str | None = field(default=None, repr=False)
	model: str = DEFAULT_MODEL
	enabled: bool = True


@dataclass
class ReleaseNotesConfig:
	github: GitHubConfig = field(default_factory=GitHubConfig)
	ai: AIConfig = field(default_factory=AIConfig)
	prompt_path: Path | None = None
	dry_run: bool = False

	def validate(self) -> None:
		"""Check that everything needed for a run is present.

		Raises:
			ValidationError: If a required value is missing
		"""
		self.github.get_repository()

		if self.ai.enabled and not self.ai.api_key:
			raise ValidationError("API key must be provided via --api-key or OPENAI_API_KEY env var")

		if not self.dry_run and not self.github.token:
			raise ValidationError("GitHub token must be provided via --github-token or GITHUB_TOKEN env var")

		if self.prompt_path and not self.prompt_path.is_file():
			raise ValidationError(f"Prompt file not found at {self.prompt_path}")

	def get_instructions(self) -> str | None:
		"""Return the custom prompt instructions, if a prompt file is configured."""
		if not self.prompt_path:
			return None

		if not self.prompt_path.is_file():
			raise ValidationError(f"Prompt file not found at {self.prompt_path}")

		try:
			return self.prompt_path.read_text(encoding="utf-8").strip()
		except (OSError, UnicodeDecodeError) as e:
			raise ValidationError(f"Could not read prompt file {self.prompt_path}: {e}") from e
