"""Example of using ai_release_notes as a library."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ai_release_notes import (
	AIConfig,
	GitHubConfig,
	ProgressEvent,
	ProgressReporter,
	ReleaseNotesBuilder,
	ReleaseNotesClient,
	ReleaseNotesConfig,
	assemble,
	get_ai_provider,
	get_commits,
)


class CustomProgressReporter(ProgressReporter):
	"""Custom progress reporter that logs to console."""

	def report(self, event: ProgressEvent) -> None:
		print(f"[{event.type.upper()}] {event.message[:100]}")


# Example 1: Basic usage with minimal configuration
def basic_usage():
	"""Generate release notes and publish them."""
	client = (
		ReleaseNotesBuilder()
		.with_github("ghp_xxxxx", "octocat/hello-world")  # Replace with your token
		.with_ai("sk-xxxxx")  # Replace with your API key
		.build()
	)

	commits = client.get_commits("v1.2.0")
	notes = client.generate_release_notes(commits)
	client.publish_release("v1.2.0", notes)


# Example 2: Preview only, with custom instructions and progress reporting
def dry_run_usage():
	"""Generate release notes without creating a release."""
	client = (
		ReleaseNotesBuilder()
		.with_github(repository="octocat/hello-world")
		.with_ai("sk-xxxxx", model="gpt-4.1")
		.with_prompt_file(Path("custom_prompt.txt"))
		.with_dry_run()
		.with_progress_reporter(CustomProgressReporter())
		.build()
	)

	commits = client.get_commits("v1.2.0", previous_tag="v1.0.0")
	print(client.generate_release_notes(commits))


# Example 3: Direct configuration (without builder)
def direct_config_usage():
	"""Generate release notes using direct configuration."""
	config = ReleaseNotesConfig(
		github=GitHubConfig(token="ghp_xxxxx", repository="octocat/hello-world"),  # Replace with your token
		ai=AIConfig(api_key="sk-xxxxx", enabled=False),
	)
	config.validate()

	client = ReleaseNotesClient(config, CustomProgressReporter())
	commits = client.get_commits("v1.2.0")
	client.publish_release("v1.2.0", client.generate_release_notes(commits), draft=True)


# Example 4: Create the provider while reading git history
def pipeline_usage():
	"""Run the pipeline steps yourself."""
	ai_config = AIConfig(api_key="sk-xxxxx")

	with ThreadPoolExecutor(max_workers=1) as executor:
		provider = executor.submit(get_ai_provider, ai_config.provider, ai_config)
		commits = get_commits("v1.2.0")
		print(assemble(commits, provider))


if __name__ == "__main__":
	dry_run_usage()
