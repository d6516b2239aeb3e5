import requests

from .models import Repository


class GitHubClient:
	"""Client to interact with the GitHub releases API."""

	def __init__(self, token: str):
		self.session = requests.Session()
		self.session.headers.update(
			{
				"Authorization": f"Bearer {token}",
				"Accept": "application/vnd.github+json",
			}
		)

	def get_release(self, repository: Repository, tag: str) -> dict | None:
		"""Get release information from GitHub API.

		Returns None if there is no release for this tag.
		"""
		r = self.session.get(f"{repository.url}/releases/tags/{tag}")
		if r.status_code == 404:
			return None

		r.raise_for_status()
		return r.json()

	def create_release(self, repository: Repository, payload: dict) -> dict:
		"""Create a new release."""
		r = self.session.post(f"{repository.url}/releases", json=payload)
		r.raise_for_status()
		return r.json()

	def update_release(self, repository: Repository, release_id: int, payload: dict) -> dict:
		"""Update an existing release in place."""
		r = self.session.patch(f"{repository.url}/releases/{release_id}", json=payload)
		r.raise_for_status()
		return r.json()

	def list_releases(self, repository: Repository, per_page: int = 30) -> list[dict]:
		"""Return the first page of releases, newest first."""
		r = self.session.get(f"{repository.url}/releases", params={"per_page": per_page})
		r.raise_for_status()
		return r.json()
