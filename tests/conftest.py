import subprocess

import pytest

from ai_release_notes.core.interfaces import ProgressEvent, ProgressReporter
from ai_release_notes.models import Commit

# Two records as printed by `git log --pretty=format:%H|%an|%ai|%s|%b|||`.
# The first body contains a pipe and a blank line, the second body is empty.
TWO_COMMIT_LOG = (
	"abc123def4567890|John Doe|2024-01-02 10:00:00 +0100|feat: add login|"
	"Adds OAuth2 | GitHub support\n\nSecond line\n|||\n"
	"def456abc7890123|Jane Smith|2024-01-01 09:00:00 +0100|fix: resolve crash||||"
)


class EventCapturingReporter(ProgressReporter):
	def __init__(self):
		self.events: list[ProgressEvent] = []

	def report(self, event: ProgressEvent) -> None:
		self.events.append(event)

	def messages(self, type: str | None = None) -> list[str]:
		return [event.message for event in self.events if type is None or event.type == type]


class FakeGit:
	"""Stand-in for subprocess.run that answers git sub-commands.

	`responses` maps a git sub-command (e.g. "log") to its stdout, or to an
	exception that should be raised instead.
	"""

	def __init__(self, responses: dict):
		self.responses = responses
		self.calls: list[list[str]] = []

	def __call__(self, args, **kwargs):
		self.calls.append(args)
		response = self.responses[args[1]]
		if isinstance(response, Exception):
			raise response
		return subprocess.CompletedProcess(args=args, returncode=0, stdout=response, stderr="")

	def calls_for(self, command: str) -> list[list[str]]:
		return [call for call in self.calls if call[1] == command]


def git_failure(stderr: str = "fatal: not a git repository") -> subprocess.CalledProcessError:
	return subprocess.CalledProcessError(128, ["git"], output="", stderr=stderr)


@pytest.fixture
def reporter():
	return EventCapturingReporter()


@pytest.fixture
def commits():
	return [
		Commit(
			hash="abc123def456",
			author="John Doe",
			date="2024-01-02 10:00:00 +0100",
			subject="feat: add new authentication system",
			body="This implements OAuth2 login\nwith support for Google and GitHub",
		),
		Commit(
			hash="def456ghi789",
			author="Jane Smith",
			date="2024-01-01 09:00:00 +0100",
			subject="fix: resolve memory leak in data processor",
		),
	]
