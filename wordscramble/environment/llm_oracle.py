import re
from typing import List, Dict, Any, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
import litellm

from .models import Message, Role
from .prompts import get_oracle_system_prompt, build_oracle_prompt


class LLMOracle(BaseModel):
    """
    Dictionary oracle that asks a chat model via LiteLLM.

    Each lookup is a fresh two-message conversation (system + user).
    Answers are cached per (word, language), so repeated submissions of
    the same word cost one API call. Provider errors are not caught here.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 0.0
    max_tokens: Optional[int] = None
    cache: Dict[Tuple[str, str], bool] = Field(default_factory=dict)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        # Pydantic stores extra fields in __pydantic_extra__
        return self.__pydantic_extra__ if hasattr(self, '__pydantic_extra__') and self.__pydantic_extra__ else {}

    def build_messages(self, word: str, language: str) -> List[Dict[str, str]]:
        """
        Build the conversation for a single lookup.

        Returns:
            List of message dictionaries in OpenAI format
        """
        def message(role: Role, content: str) -> Dict[str, str]:
            return Message(role=role, content=content).model_dump()

        return [
            message("system", get_oracle_system_prompt()),
            message("user", build_oracle_prompt(word, language)),
        ]

    def completion(self, messages: List[Dict[str, str]], **kwargs: Any) -> Any:
        """
        Generate a completion for the given messages.

        Args:
            messages: Conversation to send
            **kwargs: Additional arguments to pass to litellm.completion()

        Returns:
            The completion response from LiteLLM
        """
        params = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        return litellm.completion(**params)

    @staticmethod
    def parse_answer(content: Optional[str]) -> bool:
        """Read a YES/NO reply; anything without a leading YES counts as NO."""
        if not content:
            return False
        return re.match(r'^\W*yes\b', content.strip(), re.IGNORECASE) is not None

    def is_real_word(self, word: str, language: str = "en") -> bool:
        key = (word, language)
        if key in self.cache:
            return self.cache[key]

        response = self.completion(self.build_messages(word, language))
        answer = self.parse_answer(response.choices[0].message.content)

        self.cache[key] = answer
        return answer

    def clear_cache(self) -> None:
        """Forget all cached answers."""
        self.cache = {}
