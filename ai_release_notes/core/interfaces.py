"""Progress reporting for the release notes pipeline.

Library code never prints. It reports what it is doing through a
ProgressReporter, and the caller decides where the events go.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Literal

EventType = Literal["info", "success", "warning", "release_notes"]


@dataclass
class ProgressEvent:
	"""A single progress message.

	`release_notes` events carry the full notes as `message` and may set a
	`heading` in `metadata`. `success` events of a publish carry the
	release's `html_url`.
	"""

	type: EventType
	message: str
	metadata: dict[str, Any] | None = None


class ProgressReporter(ABC):
	@abstractmethod
	def report(self, event: ProgressEvent) -> None:
		"""Report a progress event."""
		pass


class NullProgressReporter(ProgressReporter):
	"""Discard all events; the default when used as a library."""

	def report(self, event: ProgressEvent) -> None:
		pass


class CompositeProgressReporter(ProgressReporter):
	"""Send every event to each of `reporters`, in order."""

	def __init__(self, reporters: list[ProgressReporter]):
		self.reporters = reporters

	def report(self, event: ProgressEvent) -> None:
		for reporter in self.reporters:
			reporter.report(event)
