"""Read commit ranges from the local git repository."""

import re
import subprocess
from pathlib import Path

from .core.interfaces import NullProgressReporter, ProgressEvent, ProgressReporter
from .exceptions import CommitLookupError
from .models import Commit

FIELD_SEPARATOR = "|"
RECORD_SEPARATOR = "|||"

# hash|author|date|subject|body|||
# The body comes last so that pipes inside it can be joined back together.
# A record only ends where RECORD_SEPARATOR is followed by a newline or the end
# of the output: an empty body puts one more pipe right in front of it.
# A body line ending in RECORD_SEPARATOR, or a subject / author containing
# FIELD_SEPARATOR, still breaks the split.
LOG_FORMAT = FIELD_SEPARATOR.join(["%H", "%an", "%ai", "%s", "%b"]) + RECORD_SEPARATOR
RECORD_END = re.compile(re.escape(RECORD_SEPARATOR) + r"(?:\n|$)")


def _run_git(*args: str, cwd: Path | str | None = None) -> str:
	"""Run a git command and return its stdout.

	Raises:
		subprocess.CalledProcessError: If git exits with a non-zero status
		OSError: If git cannot be executed
	"""
	result = subprocess.run(
		["git", *args],
		cwd=cwd,
		check=True,
		capture_output=True,
		text=True,
	)
	return result.stdout


def _describe_failure(error: Exception) -> str:
	if isinstance(error, subprocess.CalledProcessError) and error.stderr:
		return error.stderr.strip()
	return str(error)


def parse_log(output: str) -> list[Commit]:
	"""Parse `git log` output written with LOG_FORMAT into commits, newest first."""
	commits = []
	for entry in RECORD_END.split(output):
		if not entry.strip():
			continue

		parts = entry.split(FIELD_SEPARATOR)
		parts += [""] * (4 - len(parts))
		commit_hash, author, date, subject, *body_parts = parts

		commit_hash = commit_hash.strip()
		if not commit_hash:
			continue

		commits.append(
			Commit(
				hash=commit_hash,
				author=author.strip(),
				date=date.strip(),
				subject=subject.strip(),
				body=FIELD_SEPARATOR.join(body_parts).strip(),
			)
		)

	return commits


def get_tags(cwd: Path | str | None = None) -> list[str]:
	"""Return all tags, highest version first."""
	output = _run_git("tag", "--sort=-version:refname", cwd=cwd)
	return [tag for tag in output.strip().split("\n") if tag]


def get_previous_tag(
	current_tag: str,
	progress_reporter: ProgressReporter | None = None,
	cwd: Path | str | None = None,
) -> str | None:
	"""Return the tag preceding `current_tag` in version order.

	Returns None if `current_tag` is unknown, is the oldest tag, or the tags
	cannot be listed at all.
	"""
	try:
		tags = get_tags(cwd=cwd)
	except (subprocess.CalledProcessError, OSError) as e:
		reporter = progress_reporter or NullProgressReporter()
		reporter.report(
			ProgressEvent(type="warning", message=f"Warning: Could not determine previous tag: {_describe_failure(e)}")
		)
		return None

	if current_tag not in tags:
		return None

	index = tags.index(current_tag)
	if index == len(tags) - 1:
		return None

	return tags[index + 1]


def get_commits(
	current_tag: str,
	previous_tag: str | None = None,
	progress_reporter: ProgressReporter | None = None,
	cwd: Path | str | None = None,
) -> list[Commit]:
	"""Return the commits that are part of `current_tag`, newest first.

	If `previous_tag` is not given, the next older tag is used as the lower
	boundary. Without any boundary, all commits reachable from `current_tag`
	are returned.

	Raises:
		CommitLookupError: If the git log query fails
	"""
	reporter = progress_reporter or NullProgressReporter()

	if not previous_tag:
		previous_tag = get_previous_tag(current_tag, reporter, cwd=cwd)

	if previous_tag:
		commit_range = f"{previous_tag}..{current_tag}"
		reporter.report(ProgressEvent(type="info", message=f"Comparing {previous_tag} → {current_tag}"))
	else:
		commit_range = current_tag
		reporter.report(ProgressEvent(type="info", message=f"Getting all commits up to {current_tag}"))

	try:
		output = _run_git("log", commit_range, f"--pretty=format:{LOG_FORMAT}", cwd=cwd)
	except (subprocess.CalledProcessError, OSError) as e:
		raise CommitLookupError(f"Failed to get git commits: {_describe_failure(e)}") from e

	if not output.strip():
		return []

	return parse_log(output)


def get_latest_tag(cwd: Path | str | None = None) -> str:
	"""Return the most recent tag reachable from HEAD."""
	try:
		return _run_git("describe", "--tags", "--abbrev=0", cwd=cwd).strip()
	except (subprocess.CalledProcessError, OSError) as e:
		raise CommitLookupError(f"Failed to detect latest tag: {_describe_failure(e)}") from e


def tag_exists(tag: str, cwd: Path | str | None = None) -> bool:
	try:
		_run_git("rev-parse", "--verify", "--quiet", f"refs/tags/{tag}", cwd=cwd)
	except (subprocess.CalledProcessError, OSError):
		return False
	return True


def get_repo_url(cwd: Path | str | None = None) -> str:
	"""Return the URL of the `origin` remote."""
	try:
		return _run_git("config", "--get", "remote.origin.url", cwd=cwd).strip()
	except (subprocess.CalledProcessError, OSError) as e:
		raise CommitLookupError(f"Failed to get repository URL: {_describe_failure(e)}") from e
