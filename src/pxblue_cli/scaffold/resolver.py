"""Parameter resolution: merge pre-filled flag values with prompted answers.

Values already supplied are never asked for again. Everything still
missing is asked in one batched prompt round.
"""

from __future__ import annotations

from collections.abc import Sequence

from pxblue_cli.errors import MissingInputError, MissingParameterError
from pxblue_cli.models.questions import QuestionSpec
from pxblue_cli.toolbox.prompt import Prompter, PromptRequest


def _slot_name(index: int) -> str:
    return f"param{index}"


def resolve(
    questions: Sequence[QuestionSpec],
    prefilled: Sequence[str | None],
    prompter: Prompter,
) -> list[str]:
    """Resolve one answer per question, prompting only for the gaps.

    Args:
        questions: Ordered question specifications.
        prefilled: Values already supplied, positionally aligned with
            ``questions``. ``None`` or ``""`` marks a gap; slots past the
            end of ``prefilled`` are gaps too. Values beyond the last
            question are carried through untouched.
        prompter: Collaborator that asks the batched round.

    Returns:
        Answers in question order. A fully prefilled sequence is
        returned as given.

    Raises:
        MissingInputError: If the prompt round was aborted.
        MissingParameterError: If a required question is left empty.
    """
    if not questions:
        return []

    answers: list[str] = [value or "" for value in prefilled]
    answers.extend("" for _ in range(len(questions) - len(answers)))

    missing = [i for i in range(len(questions)) if not answers[i]]
    if not missing:
        return answers

    batch = [
        PromptRequest(
            name=_slot_name(i),
            message=questions[i].question,
            kind=questions[i].kind,
            choices=questions[i].choices,
        )
        for i in missing
    ]
    response = prompter.ask(batch)
    if response is None:
        raise MissingInputError()

    for i in missing:
        value = response.get(_slot_name(i)) or ""
        if value:
            answers[i] = value
        elif questions[i].required:
            raise MissingParameterError(questions[i].question)
    return answers
