from dataclasses import dataclass

from ._utils import short_hash


@dataclass(frozen=True)
class Commit:
	hash: str
	author: str
	date: str  # ISO-like, as printed by `git log --pretty=%ai`
	subject: str
	body: str = ""

	@property
	def short_hash(self) -> str:
		return short_hash(self.hash)

	@property
	def body_lines(self) -> list[str]:
		"""Non-blank lines of the commit body."""
		return [line for line in self.body.split("\n") if line.strip()]

	def __str__(self):
		return f"{self.subject} ({self.short_hash})"
