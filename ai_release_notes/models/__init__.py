from .commit import Commit
from .release import Release, ReleaseDescriptor
from .repository import Repository

__all__ = [
	"Commit",
	"Release",
	"ReleaseDescriptor",
	"Repository",
]
