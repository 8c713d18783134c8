from __future__ import annotations

from typing import Optional, Sequence, TextIO

_HINT = "Provide a prompt with --prompt, a positional argument, or stdin."


class PromptError(Exception):
    """Raised when no prompt text can be found."""

    pass


def prompt_from_words(words: Optional[Sequence[str]]) -> Optional[str]:
    if not words:
        return None
    prompt = " ".join(words).strip()
    return prompt or None


def resolve_prompt(
    prompt: Optional[str],
    words: Optional[Sequence[str]],
    stdin: TextIO,
) -> str:
    """Pick the prompt from --prompt, then positional words, then piped stdin.

    Raises:
        PromptError: If stdin is a terminal or piped input is blank.
    """
    text = prompt or prompt_from_words(words)
    if text:
        return text

    if stdin.isatty():
        raise PromptError(_HINT)

    piped = stdin.read().strip()
    if not piped:
        raise PromptError(f"Stdin was empty. {_HINT}")
    return piped
