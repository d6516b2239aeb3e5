from openai import OpenAI

# Reasoning models only accept the default temperature.
MODELS_WITHOUT_TEMPERATURE = {"o1", "o3", "o3-mini", "o4-mini", "gpt-5", "gpt-5-mini", "gpt-5-nano", "gpt-5.1", "gpt-5.2"}
MAX_COMPLETION_TOKENS = 2000


def get_chat_response(
	content: str,
	model: str,
	api_key: str,
	system_prompt: str | None = None,
	temperature: float = 0.7,
) -> str:
	"""Get a chat response from OpenAI.

	Raises:
		openai.OpenAIError: If the OpenAI API call fails
		ValueError: If OpenAI API returns empty content
	"""
	client = OpenAI(api_key=api_key, timeout=900.0)

	messages = []
	if system_prompt:
		messages.append({"role": "system", "content": system_prompt})
	messages.append({"role": "user", "content": content})

	options = {}
	if model not in MODELS_WITHOUT_TEMPERATURE:
		options["temperature"] = temperature

	chat_completion = client.chat.completions.create(
		messages=messages,
		model=model,
		max_completion_tokens=MAX_COMPLETION_TOKENS,
		**options,
	)

	response_content: str | None = chat_completion.choices[0].message.content
	if not response_content:
		raise ValueError("OpenAI API returned empty content")
	return str(response_content)
