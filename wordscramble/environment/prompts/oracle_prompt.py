ORACLE_SYSTEM_PROMPT = """You are a strict dictionary for a word game.

## Rules
1. You will be given a single lowercase word and a language tag
2. Answer YES if the word is a correctly spelled word in a standard dictionary of that language
3. Answer NO for misspellings, abbreviations, random letter strings, and words from other languages
4. Plural nouns and inflected verb forms count as words

## Response Format
Respond with exactly one token: YES or NO
"""


LANGUAGE_NAMES = {
    "en": "English",
}


def build_oracle_prompt(word: str, language: str) -> str:
    """Build the user message asking whether `word` is real in `language`."""
    name = LANGUAGE_NAMES.get(language, language)
    return f"Language: {name} ({language})\nWord: {word}\n\nIs this a real word? Answer YES or NO."


def get_oracle_system_prompt() -> str:
    """Return the oracle system prompt."""
    return ORACLE_SYSTEM_PROMPT
