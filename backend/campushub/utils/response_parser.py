"""
Structured response parser

Models asked for JSON do not always return bare JSON: the object may be
wrapped in a ```json fence or surrounded by prose. The parser tries, in
order: the whole text, a fenced block, then the outermost braces.
"""

import json
import re
from typing import Any, Optional

from campushub.core.logging_config import logger

_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


class JSONResponseParser:
    """Extract a JSON object from model output"""

    @staticmethod
    def _try_load(text: str) -> Optional[Any]:
        try:
            return json.loads(text)
        except (json.JSONDecodeError, TypeError):
            return None

    @classmethod
    def extract(cls, response: str) -> Optional[Any]:
        """Return the first value any strategy can decode, else None"""
        if not response or not response.strip():
            return None
        text = response.strip()

        # Strategy 1: the whole response
        parsed = cls._try_load(text)
        if parsed is not None:
            return parsed

        # Strategy 2: fenced code block
        for block in _FENCE.findall(text):
            parsed = cls._try_load(block.strip())
            if parsed is not None:
                logger.debug("[JSONResponseParser] Parsed fenced JSON block")
                return parsed

        # Strategy 3: outermost braces
        start = text.find("{")
        end = text.rfind("}")
        if start != -1 and end > start:
            parsed = cls._try_load(text[start:end + 1])
            if parsed is not None:
                logger.debug("[JSONResponseParser] Parsed JSON between outermost braces")
                return parsed

        return None

