import openai

from ..core.config import DEFAULT_MODEL, AIConfig
from ..exceptions import GenerationError
from ..openai_client import get_chat_response

SYSTEM_PROMPT = (
	"You are a helpful assistant that generates clear, concise, and well-structured release notes "
	"from git commit messages. Focus on user-facing changes and organize them into logical categories."
)


class OpenAIProvider:
	"""Generate release notes with the OpenAI chat completions API."""

	def __init__(self, config: AIConfig):
		self.config = config
		self.model = config.model or DEFAULT_MODEL

	def generate_text(self, prompt: str) -> str:
		try:
			content = get_chat_response(
				content=prompt,
				model=self.model,
				api_key=self.config.api_key,
				system_prompt=SYSTEM_PROMPT,
			)
		except (openai.OpenAIError, ValueError) as e:
			raise GenerationError(f"OpenAI API error: {e}") from e

		return content.strip()

	def get_name(self) -> str:
		return "OpenAI"
