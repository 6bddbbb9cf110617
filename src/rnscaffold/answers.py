"""Answer collection: merge command-line flags with interactive prompts."""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from rnscaffold.errors import ValidationError
from rnscaffold.prompts import ask, match_choice
from rnscaffold.request import (
    NO_THEME_LIBRARY,
    THEME_LIBRARIES,
    ScaffoldRequest,
    validate_bundle_identifier,
    validate_project_name,
)

YES = "Yes"
NO = "No"
YES_NO = (YES, NO)

NO_THEME_ALIAS = "none"


def _always(_answers):
    return True


def _navigation_chosen(answers):
    return answers.get("navigation") == YES


def _theme_chosen(answers):
    return answers.get("theme") == YES


@dataclass(frozen=True)
class Question:
    """One entry of the question table.

    Questions with ``choices`` are asked as a pick-one list, the others
    as validated free text.
    """

    key: str
    message: str
    choices: Tuple[str, ...] = ()
    validate: Optional[Callable[[str], str]] = None
    when: Callable[[dict], bool] = _always


QUESTIONS = [
    Question("name", "Project name:", validate=validate_project_name),
    Question("bundle", "Bundle identifier:", validate=validate_bundle_identifier),
    Question("navigation", "Would you like to install react-navigation?", YES_NO),
    Question("drawer", "Do you need drawer in react-navigation?", YES_NO,
             when=_navigation_chosen),
    Question("tab", "Do you need tab in react-navigation?", YES_NO,
             when=_navigation_chosen),
    Question("icon", "Do you need react-native-vector-icons?", YES_NO),
    Question("theme", "Do you need any UI library?", YES_NO),
    Question("themeList", "Pick any one UI library", tuple(THEME_LIBRARIES),
             when=_theme_chosen),
]


def _normalize_flag(question, value):
    if question.validate is not None:
        return question.validate(value)
    if question.key == "themeList" and value.strip().lower() == NO_THEME_ALIAS:
        return NO_THEME_LIBRARY
    label = None if value.strip().isdigit() else match_choice(value, question.choices)
    if label is None:
        raise ValidationError(
            f"Invalid value {value!r} for {question.key}; "
            f"expected one of: {', '.join(question.choices)}"
        )
    return label


def collect_answers(flags: Dict[str, Optional[str]], *, io=None) -> Dict[str, str]:
    """Resolve every question from *flags* or, failing that, a prompt.

    Flag values take precedence and suppress the matching prompt.
    Conditional questions are only asked when their condition holds for
    the answers resolved so far.

    Raises:
        ValidationError: A flag value is not an accepted answer.
    """
    answers = {}
    for question in QUESTIONS:
        if not question.when(answers):
            continue
        value = flags.get(question.key)
        if value:
            answers[question.key] = _normalize_flag(question, value)
        else:
            answers[question.key] = ask(
                question.message, question.choices, question.validate, io=io,
            )
    return answers


def build_request(answers: Dict[str, str]) -> ScaffoldRequest:
    navigation = answers.get("navigation") == YES
    theme = answers.get("theme") == YES
    return ScaffoldRequest(
        name=answers["name"],
        bundle_id=answers["bundle"],
        navigation=navigation,
        drawer=navigation and answers.get("drawer") == YES,
        tab=navigation and answers.get("tab") == YES,
        icon=answers.get("icon") == YES,
        theme=theme,
        theme_library=answers.get("themeList") if theme else None,
    )


def collect_request(flags: Dict[str, Optional[str]], *, io=None) -> ScaffoldRequest:
    """Produce the single immutable ScaffoldRequest for this run."""
    return build_request(collect_answers(flags, io=io))
