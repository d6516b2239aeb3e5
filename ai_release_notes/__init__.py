"""AI Release Notes - Draft GitHub release notes from git history with AI."""

# Public API exports for library usage
from .ai import AIProvider, get_ai_provider
from .api import ReleaseNotesBuilder, ReleaseNotesClient
from .core.config import AIConfig, GitHubConfig, ReleaseNotesConfig
from .core.interfaces import (
	CompositeProgressReporter,
	NullProgressReporter,
	ProgressEvent,
	ProgressReporter,
)
from .exceptions import (
	CommitLookupError,
	GenerationError,
	PublishError,
	ReleaseNotesError,
	UnsupportedProviderError,
	ValidationError,
)
from .generator import assemble, simple_notes
from .git import get_commits
from .models import Commit, Release, ReleaseDescriptor, Repository
from .prompt import format_prompt

__version__ = "1.0.0"

__all__ = [
	# Client classes
	"ReleaseNotesBuilder",
	"ReleaseNotesClient",
	# Pipeline
	"get_commits",
	"format_prompt",
	"assemble",
	"simple_notes",
	"AIProvider",
	"get_ai_provider",
	# Models
	"Commit",
	"Release",
	"ReleaseDescriptor",
	"Repository",
	# Configuration
	"ReleaseNotesConfig",
	"GitHubConfig",
	"AIConfig",
	# Errors
	"ReleaseNotesError",
	"ValidationError",
	"CommitLookupError",
	"UnsupportedProviderError",
	"GenerationError",
	"PublishError",
	# Progress reporting
	"ProgressReporter",
	"ProgressEvent",
	"NullProgressReporter",
	"CompositeProgressReporter",
]
