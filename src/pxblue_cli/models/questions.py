"""Question specifications used to resolve project parameters."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class InputKind(str, Enum):
    """How a question is presented to the user."""

    text = "text"
    choice = "choice"
    confirm = "confirm"


class QuestionSpec(BaseModel):
    """A single question: prompt text, required flag, and input kind."""

    model_config = {"extra": "forbid", "frozen": True}

    question: str
    required: bool = False
    kind: InputKind = InputKind.text
    choices: tuple[str, ...] = Field(default_factory=tuple)


QUESTIONS: dict[str, QuestionSpec] = {
    "name": QuestionSpec(question="Project Name", required=True),
    "language": QuestionSpec(
        question="Language",
        required=True,
        kind=InputKind.choice,
        choices=("JavaScript", "TypeScript"),
    ),
    "lint": QuestionSpec(
        question="Use PX Blue ESLint config?",
        required=True,
        kind=InputKind.confirm,
        choices=("Yes", "No"),
    ),
    "prettier": QuestionSpec(
        question="Use PX Blue Prettier config?",
        required=True,
        kind=InputKind.confirm,
        choices=("Yes", "No"),
    ),
    "template": QuestionSpec(
        question="Select a template",
        required=True,
        kind=InputKind.choice,
        choices=("Blank", "Routing", "Authentication"),
    ),
    "cli": QuestionSpec(
        question="Which CLI would you like to use?",
        required=True,
        kind=InputKind.choice,
        choices=("React Native Community CLI", "Expo"),
    ),
}
