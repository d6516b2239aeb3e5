"""CLI adapter for progress reporting."""

from ..core.interfaces import ProgressEvent, ProgressReporter
from ..ui import CLI

DEFAULT_HEADING = "Release Notes"


class CLIProgressReporter(ProgressReporter):
	"""Adapt ProgressReporter interface to the CLI class."""

	def __init__(self, cli: CLI):
		self.cli = cli

	def report(self, event: ProgressEvent) -> None:
		"""Route progress events to appropriate CLI methods."""
		if event.type == "success":
			self.cli.show_success(event.message)
		elif event.type == "warning":
			self.cli.show_warning(event.message)
		elif event.type == "release_notes":
			heading = (event.metadata or {}).get("heading", DEFAULT_HEADING)
			self.cli.show_release_notes(heading, event.message)
		else:
			self.cli.show_text(event.message)
