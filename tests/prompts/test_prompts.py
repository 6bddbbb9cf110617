"""Tests for prompts — pick-one questions, validated text, closed input."""

import io

import pytest

from rnscaffold.answers import YES_NO
from rnscaffold.prompts import PromptIO, ask, ask_choice, ask_text, match_choice
from rnscaffold.request import THEME_LIBRARIES, validate_bundle_identifier


class ScriptedTerminal:
    """Answers prompts from a script and keeps what was shown."""

    def __init__(self, *answers):
        self._answers = list(answers)
        self.prompts = []
        self.output = io.StringIO()

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError()
        return self._answers.pop(0)

    @property
    def io(self):
        return PromptIO(read=self.read, output=self.output)

    @property
    def shown(self):
        return self.output.getvalue()


@pytest.mark.parametrize("raw,expected", [
    ("1", "Yes"),
    ("2", "No"),
    ("yes", "Yes"),
    (" NO ", "No"),
    ("3", None),
    ("0", None),
    ("maybe", None),
])
def test_match_choice(raw, expected):
    assert match_choice(raw, YES_NO) == expected


class TestAskChoice:

    def test_returns_label_not_index(self):
        terminal = ScriptedTerminal("4")
        assert ask_choice("Pick any one UI library", THEME_LIBRARIES, io=terminal.io) == "react-native-paper"

    def test_empty_answer_picks_first_choice(self):
        terminal = ScriptedTerminal("")
        assert ask_choice("Do you need any UI library?", YES_NO, io=terminal.io) == "Yes"

    def test_label_typed_in_any_case(self):
        terminal = ScriptedTerminal("native-BASE")
        assert ask_choice("Pick any one UI library", THEME_LIBRARIES, io=terminal.io) == "native-base"

    def test_lists_choices_with_first_marked(self):
        terminal = ScriptedTerminal("2")
        ask_choice("Do you need tab in react-navigation?", YES_NO, io=terminal.io)

        assert "? Do you need tab in react-navigation?" in terminal.shown
        assert " > 1) Yes" in terminal.shown
        assert "   2) No" in terminal.shown

    def test_unrecognised_answer_asks_again(self):
        terminal = ScriptedTerminal("7", "perhaps", "No")
        assert ask_choice("Do you need any UI library?", YES_NO, io=terminal.io) == "No"
        assert len(terminal.prompts) == 3
        assert terminal.shown.count("Please answer with 1-2") == 2

    def test_closed_input_exits_cleanly(self):
        terminal = ScriptedTerminal()
        with pytest.raises(SystemExit) as exc_info:
            ask_choice("Do you need any UI library?", YES_NO, io=terminal.io)
        assert exc_info.value.code == 0
        assert "Input closed. Exiting." in terminal.shown


class TestAskText:

    def test_strips_answer(self):
        terminal = ScriptedTerminal("  Foo ")
        assert ask_text("Project name:", io=terminal.io) == "Foo"
        assert terminal.prompts == ["? Project name: "]

    def test_invalid_bundle_is_asked_again_with_reason(self):
        terminal = ScriptedTerminal("comexampleapp", "com.foo.bar")
        value = ask_text("Bundle identifier:", validate_bundle_identifier, io=terminal.io)

        assert value == "com.foo.bar"
        assert ">> Provide a valid bundle identifier" in terminal.shown

    def test_closed_input_exits_cleanly(self):
        with pytest.raises(SystemExit) as exc_info:
            ask_text("Project name:", io=ScriptedTerminal().io)
        assert exc_info.value.code == 0


class TestAsk:

    def test_choices_make_a_choice_question(self):
        terminal = ScriptedTerminal("2")
        assert ask("Do you need any UI library?", YES_NO, io=terminal.io) == "No"

    def test_no_choices_make_a_text_question(self):
        terminal = ScriptedTerminal("Foo")
        assert ask("Project name:", io=terminal.io) == "Foo"
