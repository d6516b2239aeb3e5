"""Errors raised by the release notes pipeline.

Every error is terminal for the current run. Library code raises them and the
command-line entry point turns them into a non-zero exit code.
"""


class ReleaseNotesError(Exception):
	"""Base class for all errors raised by ai_release_notes."""


class ValidationError(ReleaseNotesError, ValueError):
	"""Required input is missing or malformed. Raised before any I/O happens."""


class CommitLookupError(ReleaseNotesError):
	"""The git query for the commit range failed."""


class UnsupportedProviderError(ReleaseNotesError):
	"""No text generation backend is registered under the requested name."""


class GenerationError(ReleaseNotesError):
	"""The text generation backend failed to produce release notes."""


class PublishError(ReleaseNotesError):
	"""The GitHub releases API rejected a request."""
