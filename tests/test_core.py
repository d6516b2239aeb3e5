"""Unit tests for core configuration and interfaces."""

from pathlib import Path

import pytest

from ai_release_notes.core.config import (
	DEFAULT_MODEL,
	AIConfig,
	GitHubConfig,
	ReleaseNotesConfig,
)
from ai_release_notes.core.config_loader import (
	DictConfigLoader,
	EnvConfigLoader,
	TomlConfigLoader,
	merge_configs,
)
from ai_release_notes.core.interfaces import (
	CompositeProgressReporter,
	NullProgressReporter,
	ProgressEvent,
	ProgressReporter,
)
from ai_release_notes.exceptions import ValidationError


class TestProgressEvent:
	"""Test ProgressEvent dataclass."""

	def test_create_basic_event(self):
		event = ProgressEvent(type="info", message="Test message")
		assert event.type == "info"
		assert event.message == "Test message"
		assert event.metadata is None

	def test_create_event_with_metadata(self):
		event = ProgressEvent(type="success", message="Done", metadata={"key": "value"})
		assert event.metadata == {"key": "value"}


class TestProgressReporter:
	"""Test ProgressReporter implementations."""

	def test_null_reporter_does_nothing(self):
		NullProgressReporter().report(ProgressEvent(type="info", message="Test"))

	def test_composite_reporter_calls_all(self):
		"""Test that composite reporter calls all sub-reporters."""

		class MockReporter(ProgressReporter):
			def __init__(self):
				self.events = []

			def report(self, event: ProgressEvent) -> None:
				self.events.append(event)

		reporter1 = MockReporter()
		reporter2 = MockReporter()
		composite = CompositeProgressReporter([reporter1, reporter2])

		event = ProgressEvent(type="info", message="Test")
		composite.report(event)

		assert reporter1.events == [event]
		assert reporter2.events == [event]


def valid_config(**overrides) -> ReleaseNotesConfig:
	config = ReleaseNotesConfig(
		github=GitHubConfig(token="gh_token", repository="owner/repo"),
		ai=AIConfig(api_key="sk-test"),
	)
	for key, value in overrides.items():
		setattr(config, key, value)
	return config


class TestReleaseNotesConfig:
	"""Test ReleaseNotesConfig validation."""

	def test_defaults(self):
		config = ReleaseNotesConfig()
		assert config.ai.provider == "openai"
		assert config.ai.model == DEFAULT_MODEL
		assert config.ai.enabled is True
		assert config.prompt_path is None
		assert config.dry_run is False

	def test_valid(self):
		valid_config().validate()

	def test_missing_repository(self):
		config = valid_config()
		config.github.repository = None
		with pytest.raises(ValidationError, match="Repository must be specified"):
			config.validate()

	def test_malformed_repository(self):
		config = valid_config()
		config.github.repository = "just-a-name"
		with pytest.raises(ValidationError, match="owner/repo"):
			config.validate()

	def test_missing_api_key(self):
		config = valid_config()
		config.ai.api_key = None
		with pytest.raises(ValidationError, match="API key must be provided"):
			config.validate()

	def test_api_key_not_needed_without_ai(self):
		config = valid_config()
		config.ai.api_key = None
		config.ai.enabled = False
		config.validate()

	def test_missing_github_token(self):
		config = valid_config()
		config.github.token = None
		with pytest.raises(ValidationError, match="GitHub token must be provided"):
			config.validate()

	def test_github_token_not_needed_for_dry_run(self):
		config = valid_config(dry_run=True)
		config.github.token = None
		config.validate()

	def test_validation_error_is_value_error(self):
		with pytest.raises(ValueError):
			ReleaseNotesConfig().validate()

	def test_secrets_not_in_repr(self):
		assert "gh_token" not in repr(valid_config())
		assert "sk-test" not in repr(valid_config())

	def test_instructions_from_prompt_file(self, tmp_path):
		prompt_file = tmp_path / "prompt.txt"
		prompt_file.write_text("Custom instructions\n")

		assert valid_config(prompt_path=prompt_file).get_instructions() == "Custom instructions"
		assert valid_config().get_instructions() is None

	def test_missing_prompt_file(self, tmp_path):
		with pytest.raises(ValidationError, match="Prompt file not found"):
			valid_config(prompt_path=tmp_path / "missing.txt").get_instructions()

	def test_validate_checks_prompt_file(self, tmp_path):
		valid_config(prompt_path=None).validate()

		with pytest.raises(ValidationError, match="Prompt file not found"):
			valid_config(prompt_path=tmp_path / "missing.txt").validate()

		with pytest.raises(ValidationError, match="Prompt file not found"):
			valid_config(prompt_path=tmp_path).validate()

	def test_undecodable_prompt_file(self, tmp_path):
		prompt_file = tmp_path / "prompt.txt"
		prompt_file.write_bytes(b"\xff\xfe\xfa")

		with pytest.raises(ValidationError, match="Could not read prompt file"):
			valid_config(prompt_path=prompt_file).get_instructions()


class TestDictConfigLoader:
	def test_load_minimal_config(self):
		config = DictConfigLoader({"repository": "owner/repo"}).load()

		assert config.github.repository == "owner/repo"
		assert config.github.token is None
		assert config.ai.model == DEFAULT_MODEL

	def test_load_full_config(self):
		config = DictConfigLoader(
			{
				"github_token": "gh_token",
				"repository": "owner/repo",
				"provider": "OpenAI",
				"api_key": "sk-test",
				"model": "gpt-4.1",
				"use_ai": False,
				"prompt_path": "custom.txt",
				"dry_run": True,
			}
		).load()

		assert config.github.token == "gh_token"
		assert config.ai.provider == "OpenAI"
		assert config.ai.api_key == "sk-test"
		assert config.ai.model == "gpt-4.1"
		assert config.ai.enabled is False
		assert config.prompt_path == Path("custom.txt")
		assert config.dry_run is True


class TestEnvConfigLoader:
	def test_reads_environment(self, tmp_path):
		environ = {
			"GITHUB_REPOSITORY": "owner/repo",
			"GITHUB_TOKEN": "gh_token",
			"OPENAI_API_KEY": "sk-test",
			"OPENAI_MODEL": "gpt-4.1",
		}
		config = EnvConfigLoader(tmp_path / ".env", environ=environ).load()

		assert config.github.repository == "owner/repo"
		assert config.github.token == "gh_token"
		assert config.ai.api_key == "sk-test"
		assert config.ai.model == "gpt-4.1"

	def test_reads_env_file(self, tmp_path):
		env_file = tmp_path / ".env"
		env_file.write_text("GITHUB_REPOSITORY=owner/repo\nOPENAI_API_KEY=sk-from-file\n")

		config = EnvConfigLoader(env_file, environ={}).load()

		assert config.github.repository == "owner/repo"
		assert config.ai.api_key == "sk-from-file"
		assert config.ai.model == DEFAULT_MODEL

	def test_environment_wins_over_env_file(self, tmp_path):
		env_file = tmp_path / ".env"
		env_file.write_text("OPENAI_API_KEY=sk-from-file\n")

		config = EnvConfigLoader(env_file, environ={"OPENAI_API_KEY": "sk-from-env"}).load()

		assert config.ai.api_key == "sk-from-env"

	def test_missing_env_file(self, tmp_path):
		config = EnvConfigLoader(tmp_path / ".env", environ={}).load()

		assert config.github.repository is None
		assert config.ai.api_key is None


class TestTomlConfigLoader:
	def test_load_config(self, tmp_path):
		config_file = tmp_path / "config.toml"
		config_file.write_text(
			"""
prompt_path = "prompt.txt"

[github]
token = "gh_token"
repository = "owner/repo"

[ai]
api_key = "sk-test"
model = "gpt-4.1"
enabled = false
"""
		)

		config = TomlConfigLoader(config_file).load()

		assert config.github.token == "gh_token"
		assert config.github.repository == "owner/repo"
		assert config.ai.api_key == "sk-test"
		assert config.ai.model == "gpt-4.1"
		assert config.ai.enabled is False
		assert config.prompt_path == Path("prompt.txt")

	def test_missing_sections(self, tmp_path):
		config_file = tmp_path / "config.toml"
		config_file.write_text("")

		config = TomlConfigLoader(config_file).load()

		assert config.github.token is None
		assert config.ai.provider == "openai"

	def test_missing_file_raises_error(self, tmp_path):
		with pytest.raises(FileNotFoundError, match="Config file not found"):
			TomlConfigLoader(tmp_path / "nonexistent.toml").load()

	def test_malformed_file_raises_validation_error(self, tmp_path):
		config_file = tmp_path / "config.toml"
		config_file.write_text("[github\nrepository = ")

		with pytest.raises(ValidationError, match="Could not read config file"):
			TomlConfigLoader(config_file).load()

	def test_default_path(self):
		assert TomlConfigLoader().config_path == TomlConfigLoader.DEFAULT_CONFIG_PATH


class TestMergeConfigs:
	def test_override_wins(self):
		base = DictConfigLoader({"repository": "base/repo", "api_key": "sk-base", "model": "gpt-4.1"}).load()
		override = DictConfigLoader({"repository": "env/repo"}).load()

		merged = merge_configs(base, override)

		assert merged.github.repository == "env/repo"
		assert merged.ai.api_key == "sk-base"
		assert merged.ai.model == "gpt-4.1"

	def test_keeps_base_settings(self):
		base = DictConfigLoader({"use_ai": False, "dry_run": True, "provider": "openai"}).load()
		merged = merge_configs(base, DictConfigLoader({"model": "gpt-4o"}).load())

		assert merged.ai.enabled is False
		assert merged.dry_run is True
		assert merged.ai.model == "gpt-4o"
