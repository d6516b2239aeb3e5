from .provider import PROVIDERS, AIProvider, get_ai_provider, resolve_provider

__all__ = [
	"PROVIDERS",
	"AIProvider",
	"get_ai_provider",
	"resolve_provider",
]
