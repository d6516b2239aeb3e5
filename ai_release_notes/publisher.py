"""Create or update GitHub releases."""

import requests

from .core.interfaces import NullProgressReporter, ProgressEvent, ProgressReporter
from .exceptions import PublishError
from .github_client import GitHubClient
from .models import Release, ReleaseDescriptor, Repository


class ReleasePublisher:
	def __init__(self, github: GitHubClient, progress_reporter: ProgressReporter | None = None):
		self.github = github
		self.progress_reporter = progress_reporter or NullProgressReporter()

	def publish(self, descriptor: ReleaseDescriptor) -> Release:
		"""Create the release for `descriptor.tag`, or update it if it already exists.

		Raises:
			PublishError: If any request to GitHub fails
		"""
		repository = descriptor.repository
		payload = descriptor.to_payload()

		try:
			existing = self.github.get_release(repository, descriptor.tag)

			if existing:
				self._report(f"Updating existing release for {descriptor.tag}...")
				data = self.github.update_release(repository, existing["id"], payload)
			else:
				self._report(f"Creating new release for {descriptor.tag}...")
				data = self.github.create_release(repository, payload)
		except requests.RequestException as e:
			raise PublishError(f"Failed to create/update GitHub release: {e}") from e

		return Release.from_dict(data)

	def get_release(self, repository: Repository, tag: str) -> Release | None:
		try:
			data = self.github.get_release(repository, tag)
		except requests.RequestException as e:
			raise PublishError(f"Failed to get GitHub release: {e}") from e

		return Release.from_dict(data) if data else None

	def list_releases(self, repository: Repository, per_page: int = 30) -> list[Release]:
		try:
			data = self.github.list_releases(repository, per_page=per_page)
		except requests.RequestException as e:
			raise PublishError(f"Failed to list GitHub releases: {e}") from e

		return [Release.from_dict(release) for release in data]

	def _report(self, message: str) -> None:
		self.progress_reporter.report(ProgressEvent(type="info", message=message))
