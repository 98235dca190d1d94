from anthropic import AsyncAnthropic
from typing import Optional, Dict, List, Any
import httpx
from campushub.core.config import settings
from campushub.core.logging_config import logger

REQUEST_TIMEOUT = float(settings.CLAUDE_REQUEST_TIMEOUT)
CONNECT_TIMEOUT = float(settings.CLAUDE_CONNECT_TIMEOUT)


class ClaudeClient:
    """Claude API client wrapper for single-shot, non-streaming requests"""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        client_kwargs = {"api_key": api_key or settings.ANTHROPIC_API_KEY}

        # Only set base_url if it's a non-empty string with actual content
        base_url = base_url if base_url is not None else settings.ANTHROPIC_BASE_URL
        if base_url and base_url.strip():
            client_kwargs["base_url"] = base_url.strip()
            logger.info(f"Using custom Claude API base URL: {base_url}")

        client_kwargs["timeout"] = httpx.Timeout(
            connect=CONNECT_TIMEOUT,
            read=REQUEST_TIMEOUT,
            write=REQUEST_TIMEOUT,
            pool=REQUEST_TIMEOUT
        )
        # Generation flows make exactly one attempt
        client_kwargs["max_retries"] = 0

        self.async_client = AsyncAnthropic(**client_kwargs)
        self.model = settings.CLAUDE_MODEL

        logger.info(f"Claude client initialized: timeout={REQUEST_TIMEOUT}s, model={self.model}")

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = None,
        temperature: float = None,
        messages: Optional[List[Dict[str, str]]] = None
    ) -> Dict[str, Any]:
        """
        Generate response from Claude (non-streaming)

        Args:
            prompt: User prompt
            system_prompt: System prompt
            max_tokens: Maximum tokens to generate
            temperature: Temperature for generation
            messages: Optional list of previous messages for conversation

        Returns:
            Dict with response and metadata
        """
        messages = list(messages or [])
        messages.append({
            "role": "user",
            "content": prompt
        })

        if max_tokens is None:
            max_tokens = settings.CLAUDE_MAX_TOKENS
        if temperature is None:
            temperature = settings.CLAUDE_TEMPERATURE

        prompt_preview = prompt[:100] + "..." if len(prompt) > 100 else prompt
        logger.info(f"Claude API: model={self.model}, max_tokens={max_tokens}, prompt_len={len(prompt)}")
        logger.debug(f"Claude request prompt: {prompt_preview}")

        try:
            response = await self.async_client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system_prompt if system_prompt else "",
                messages=messages
            )
        except Exception as e:
            logger.error(
                f"Claude API error: {type(e).__name__}: {e}",
                extra={
                    "event_type": "claude_api_error",
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                }
            )
            raise

        content = response.content[0].text if response.content else ""

        result = {
            "content": content,
            "model": self.model,
            "input_tokens": response.usage.input_tokens,
            "output_tokens": response.usage.output_tokens,
            "total_tokens": response.usage.input_tokens + response.usage.output_tokens,
            "stop_reason": response.stop_reason,
            "id": response.id
        }

        logger.info(f"Claude API response: id={response.id}, tokens={result['total_tokens']}, stop={response.stop_reason}")
        logger.debug(f"Claude response preview: {content[:200]}..." if len(content) > 200 else content)

        return result


_client: Optional[ClaudeClient] = None


def get_claude_client() -> ClaudeClient:
    """Lazily created shared client"""
    global _client
    if _client is None:
        _client = ClaudeClient()
    return _client
