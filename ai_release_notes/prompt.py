"""Turn a list of commits into a prompt for the text generation backend."""

from collections.abc import Sequence

from .models import Commit

DEFAULT_INSTRUCTIONS = """Instructions:
- Group changes into logical categories (e.g., Features, Bug Fixes, Performance, Documentation, etc.)
- Focus on user-facing changes and impact
- Use clear, concise language
- Start each item with an action verb
- Omit internal/technical details that don't affect users
- Format the output in Markdown
- If there are breaking changes, highlight them in a separate section"""

DETAILS_INDENT = "   "


def format_commit(index: int, commit: Commit) -> str:
	"""Render one numbered entry of the commit list."""
	entry = f"{index}. {commit.subject}\n"
	entry += f"{DETAILS_INDENT}Author: {commit.author}\n"
	entry += f"{DETAILS_INDENT}Hash: {commit.short_hash}\n"

	body_lines = commit.body_lines
	if body_lines:
		details = f"\n{DETAILS_INDENT}".join(body_lines)
		entry += f"{DETAILS_INDENT}Details: {details}\n"

	return entry


def format_prompt(commits: Sequence[Commit], instructions: str | None = None) -> str:
	"""Build the prompt asking for release notes for `commits`.

	Args:
		commits: Commits in the order they should be listed (newest first)
		instructions: Replaces the default instructions block

	Returns:
		The prompt text. Its size is not limited here.
	"""
	prompt = f"Generate professional release notes from the following {len(commits)} commit(s).\n\n"
	prompt += f"{instructions or DEFAULT_INSTRUCTIONS}\n\n"
	prompt += "Commits:\n\n"

	for index, commit in enumerate(commits, start=1):
		prompt += format_commit(index, commit)
		prompt += "\n"

	prompt += "\nPlease generate the release notes now:"
	return prompt
