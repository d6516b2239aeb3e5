"""Assemble the final release notes text."""

from collections.abc import Sequence
from concurrent.futures import Future

from .ai import AIProvider, resolve_provider
from .models import Commit
from .prompt import format_prompt

NO_CHANGES = "## What's Changed\n\nNo changes in this release."


def get_changelog_footer(commits: Sequence[Commit]) -> str:
	"""Summarize the range; commits are expected newest first."""
	oldest, newest = commits[-1], commits[0]
	return f"\n\n---\n\n**Full Changelog**: {len(commits)} commit(s) from {oldest.short_hash} to {newest.short_hash}"


def assemble(
	commits: Sequence[Commit] | None,
	provider: "AIProvider | Future[AIProvider]",
	instructions: str | None = None,
) -> str:
	"""Generate release notes for `commits` with an AI provider.

	Args:
		commits: Commits of the release, newest first
		provider: The provider, or a future that will hold it
		instructions: Custom instructions for the prompt

	Returns:
		Markdown release notes followed by a changelog footer. If there are no
		commits, a fixed notice is returned and the provider is never called.
	"""
	if not commits:
		return NO_CHANGES

	provider = resolve_provider(provider)
	prompt = format_prompt(commits, instructions)
	release_notes = provider.generate_text(prompt)

	return release_notes + get_changelog_footer(commits)


def simple_notes(commits: Sequence[Commit] | None) -> str:
	"""List commit subjects without calling any AI provider."""
	if not commits:
		return NO_CHANGES

	notes = "## What's Changed\n\n"
	for commit in commits:
		notes += f"- {commit.subject} ({commit.short_hash})\n"

	return notes
