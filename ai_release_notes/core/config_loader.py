import os
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from ..exceptions import ValidationError
from .config import (
	DEFAULT_MODEL,
	DEFAULT_PROVIDER,
	AIConfig,
	GitHubConfig,
	ReleaseNotesConfig,
)


class ConfigLoader(ABC):
	@abstractmethod
	def load(self) -> ReleaseNotesConfig:
		"""Load configuration from source."""
		pass


class DictConfigLoader(ConfigLoader):
	"""Load from dictionary (for programmatic usage)."""

	def __init__(self, config_dict: dict[str, Any]):
		self.config_dict = config_dict

	def load(self) -> ReleaseNotesConfig:
		return ReleaseNotesConfig(
			github=GitHubConfig(
				token=self.config_dict.get("github_token"),
				repository=self.config_dict.get("repository"),
			),
			ai=AIConfig(
				provider=self.config_dict.get("provider", DEFAULT_PROVIDER),
				api_key=self.config_dict.get("api_key"),
				model=self.config_dict.get("model", DEFAULT_MODEL),
				enabled=self.config_dict.get("use_ai", True),
			),
			prompt_path=Path(self.config_dict["prompt_path"]) if self.config_dict.get("prompt_path") else None,
			dry_run=self.config_dict.get("dry_run", False),
		)


class EnvConfigLoader(ConfigLoader):
	"""Load from the process environment, falling back to a .env file.

	Variables that are set in the environment win over the .env file.
	"""

	def __init__(self, env_path: str | Path = ".env", environ: dict[str, str] | None = None):
		self.env_path = env_path
		self.environ = os.environ if environ is None else environ

	def load(self) -> ReleaseNotesConfig:
		config = self.values()

		return ReleaseNotesConfig(
			github=GitHubConfig(
				token=config.get("GITHUB_TOKEN"),
				repository=config.get("GITHUB_REPOSITORY"),
			),
			ai=AIConfig(
				api_key=config.get("OPENAI_API_KEY"),
				model=config.get("OPENAI_MODEL") or DEFAULT_MODEL,
			),
			prompt_path=Path(config["PROMPT_PATH"]) if config.get("PROMPT_PATH") else None,
		)

	def values(self) -> dict[str, str | None]:
		values = dict(dotenv_values(self.env_path))
		values.update(self.environ)
		return values


class TomlConfigLoader(ConfigLoader):
	"""Load from TOML file."""

	DEFAULT_CONFIG_PATH = Path.home() / ".ai-release-notes" / "config.toml"

	def __init__(self, config_path: Path | str | None = None):
		"""Initialize TOML config loader.

		Args:
			config_path: Path to config file. If None, uses DEFAULT_CONFIG_PATH.
		"""
		if config_path is None:
			self.config_path = self.DEFAULT_CONFIG_PATH
		else:
			self.config_path = Path(config_path)

	def load(self) -> ReleaseNotesConfig:
		"""Load configuration from TOML file.

		Raises:
			FileNotFoundError: If config file doesn't exist
			ValidationError: If the file cannot be read or is not valid TOML
		"""
		if not self.config_path.exists():
			raise FileNotFoundError(
				f"Config file not found at {self.config_path}. "
				f"Create it or use --config-path to specify a different location."
			)

		try:
			with open(self.config_path, "rb") as f:
				config = tomllib.load(f)
		except (OSError, tomllib.TOMLDecodeError) as e:
			raise ValidationError(f"Could not read config file {self.config_path}: {e}") from e

		github_config = config.get("github", {})
		ai_config = config.get("ai", {})

		return ReleaseNotesConfig(
			github=GitHubConfig(
				token=github_config.get("token"),
				repository=github_config.get("repository"),
			),
			ai=AIConfig(
				provider=ai_config.get("provider", DEFAULT_PROVIDER),
				api_key=ai_config.get("api_key"),
				model=ai_config.get("model", DEFAULT_MODEL),
				enabled=ai_config.get("enabled", True),
			),
			prompt_path=Path(config["prompt_path"]) if "prompt_path" in config else None,
			dry_run=config.get("dry_run", False),
		)


def merge_configs(base: ReleaseNotesConfig, override: ReleaseNotesConfig) -> ReleaseNotesConfig:
	"""Fill the unset values of `override` from `base`.

	Only values that can come from the environment are merged: credentials,
	repository, model and prompt path.
	"""
	return ReleaseNotesConfig(
		github=GitHubConfig(
			token=override.github.token or base.github.token,
			repository=override.github.repository or base.github.repository,
		),
		ai=AIConfig(
			provider=base.ai.provider,
			api_key=override.ai.api_key or base.ai.api_key,
			model=override.ai.model if override.ai.model != DEFAULT_MODEL else base.ai.model,
			enabled=base.ai.enabled,
		),
		prompt_path=override.prompt_path or base.prompt_path,
		dry_run=base.dry_run,
	)
