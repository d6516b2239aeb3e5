from dataclasses import dataclass
from typing import Any

from ._utils import is_prerelease_tag
from .repository import Repository


@dataclass
class ReleaseDescriptor:
	"""What we want a GitHub release to look like."""

	repository: Repository
	tag: str
	body: str
	name: str | None = None
	draft: bool = False
	prerelease: bool | None = None  # None means: detect from the tag name

	@property
	def title(self) -> str:
		return self.name or self.tag

	@property
	def is_prerelease(self) -> bool:
		if self.prerelease is not None:
			return self.prerelease
		return is_prerelease_tag(self.tag)

	def to_payload(self) -> dict[str, Any]:
		return {
			"tag_name": self.tag,
			"name": self.title,
			"body": self.body,
			"draft": self.draft,
			"prerelease": self.is_prerelease,
		}


@dataclass
class Release:
	"""A release as returned by the GitHub API."""

	id: int
	tag_name: str
	name: str | None = None
	body: str | None = None
	draft: bool = False
	prerelease: bool = False
	html_url: str | None = None

	@classmethod
	def from_dict(cls, data: dict) -> "Release":
		return cls(
			id=data["id"],
			tag_name=data["tag_name"],
			name=data.get("name"),
			body=data.get("body"),
			draft=data.get("draft", False),
			prerelease=data.get("prerelease", False),
			html_url=data.get("html_url"),
		)
