from __future__ import annotations

import io

import pytest

from addon_starter.prompts import Prompter


def _prompter(answers: str) -> tuple[Prompter, io.StringIO]:
    stdout = io.StringIO()
    return Prompter(io.StringIO(answers), stdout), stdout


def test_prompt_returns_trimmed_answer_or_default():
    prompter, stdout = _prompter("  Demo  \n\n")
    assert prompter.prompt("Addon Name") == "Demo"
    assert prompter.prompt("Addon Description", "Demo for WP Travel Engine") == "Demo for WP Travel Engine"
    assert "Addon Description [Demo for WP Travel Engine]: " in stdout.getvalue()


def test_prompt_at_end_of_input_uses_default():
    prompter, _ = _prompter("")
    assert prompter.prompt("Anything", "fallback") == "fallback"


@pytest.mark.parametrize(
    "answer, expected",
    [
        ("2\n", "trip-edit"),
        ("both\n", "both"),
        ("\n", "none"),
        ("7\n", "none"),
        ("-1\n", "none"),
        ("maybe\n", "none"),
        ("²\n", "none"),
    ],
)
def test_choice_falls_back_to_default(answer, expected):
    prompter, _ = _prompter(answer)
    assert prompter.choice("Settings?", ["none", "global", "trip-edit", "both"], 0) == expected


def test_choice_lists_options():
    prompter, stdout = _prompter("1\n")
    assert prompter.choice("Is this a payment gateway addon?", ["no", "yes"]) == "yes"
    output = stdout.getvalue()
    assert "  [0] no (default)\n" in output
    assert "  [1] yes\n" in output
