"""Registry of text generation backends."""

from concurrent.futures import Future
from importlib import import_module
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..exceptions import UnsupportedProviderError

if TYPE_CHECKING:
	from ..core.config import AIConfig


@runtime_checkable
class AIProvider(Protocol):
	def generate_text(self, prompt: str) -> str:
		"""Return the trimmed completion for `prompt`."""
		...

	def get_name(self) -> str:
		"""Return a human-readable name of the backend."""
		...


# Backends are imported only when selected, so that unused SDKs are never loaded.
PROVIDERS: dict[str, str] = {
	"openai": "ai_release_notes.ai.openai_provider:OpenAIProvider",
}


def get_ai_provider(provider_name: str, config: "AIConfig") -> AIProvider:
	"""Instantiate the backend registered under `provider_name` (case-insensitive).

	Raises:
		UnsupportedProviderError: If no backend is registered under that name
	"""
	target = PROVIDERS.get((provider_name or "").lower())
	if not target:
		supported = ", ".join(sorted(PROVIDERS))
		raise UnsupportedProviderError(f"Unknown AI provider: {provider_name}. Supported providers: {supported}")

	module_name, class_name = target.split(":")
	provider_class = getattr(import_module(module_name), class_name)
	return provider_class(config)


def resolve_provider(provider: "AIProvider | Future[AIProvider]") -> AIProvider:
	"""Return a ready provider, waiting for it if it is still being created."""
	if isinstance(provider, Future):
		return provider.result()
	return provider
