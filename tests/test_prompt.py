from __future__ import annotations

import io

import pytest

from genimg_cli.prompt import PromptError, resolve_prompt


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestResolvePrompt:
    def test_flag_wins(self) -> None:
        assert resolve_prompt("from flag", ["from", "words"], io.StringIO("piped")) == "from flag"

    def test_positional_words_joined(self) -> None:
        assert resolve_prompt(None, ["a", "red", "fox "], io.StringIO("")) == "a red fox"

    def test_blank_words_fall_through_to_stdin(self) -> None:
        assert resolve_prompt(None, ["  "], io.StringIO("  piped prompt\n")) == "piped prompt"

    def test_tty_without_prompt(self) -> None:
        with pytest.raises(PromptError) as exc_info:
            resolve_prompt(None, None, _Tty())
        assert "--prompt" in str(exc_info.value)

    def test_empty_stdin(self) -> None:
        with pytest.raises(PromptError) as exc_info:
            resolve_prompt(None, [], io.StringIO("\n \n"))
        assert str(exc_info.value).startswith("Stdin was empty.")
