from dataclasses import dataclass

from ..exceptions import ValidationError

GITHUB_API_URL = "https://api.github.com"


@dataclass
class Repository:
	owner: str
	name: str

	@property
	def url(self) -> str:
		"""Base URL of this repository in the GitHub REST API."""
		return f"{GITHUB_API_URL}/repos/{self.owner}/{self.name}"

	@property
	def full_name(self) -> str:
		return f"{self.owner}/{self.name}"

	@classmethod
	def from_string(cls, value: str) -> "Repository":
		"""Parse an identifier in the format owner/repo."""
		parts = (value or "").strip().split("/")
		if len(parts) != 2 or not all(part.strip() for part in parts):
			raise ValidationError(f"Repository must be in format owner/repo, got: {value!r}")

		owner, name = (part.strip() for part in parts)
		return cls(owner=owner, name=name)
