import re

PRERELEASE_TAG = re.compile(r"-(alpha|beta|rc|pre)", re.IGNORECASE)
SHORT_HASH_LENGTH = 8


def is_prerelease_tag(tag: str) -> bool:
	"""Tell whether a tag name marks a prerelease.

	Examples:
	'v1.0.0-beta.1' -> True
	'2.0.0-RC1' -> True
	'v1.0.0' -> False
	"""
	return bool(tag and PRERELEASE_TAG.search(tag))


def short_hash(commit_hash: str) -> str:
	return commit_hash[:SHORT_HASH_LENGTH]
