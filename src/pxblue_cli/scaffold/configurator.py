"""Project configurator: resolve a project's settings and run its generator.

Each ``create_*_project`` function walks a fixed question sequence,
builds the framework's config record, then spawns the framework's own
scaffolding CLI to create the base project in the current directory.
All questions are settled before anything touches the filesystem.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from pxblue_cli.cli.output import print_process_output
from pxblue_cli.errors import InvalidParameterError
from pxblue_cli.models.project import (
    AngularConfig,
    Cli,
    Framework,
    IonicConfig,
    Language,
    NewProjectOptions,
    ProjectConfig,
    ReactConfig,
    ReactNativeConfig,
    TemplateSelection,
)
from pxblue_cli.models.questions import QUESTIONS
from pxblue_cli.scaffold.commands import (
    LEGACY_PEER_DEPS_ENV,
    angular_new_command,
    ionic_new_command,
    react_native_new_command,
    react_new_command,
)
from pxblue_cli.scaffold.mapping import (
    assign_cli,
    assign_language,
    is_yes,
    parse_template,
    yes_no,
)
from pxblue_cli.scaffold.resolver import resolve
from pxblue_cli.toolbox.context import Toolbox

_ConfigT = TypeVar("_ConfigT", bound=BaseModel)


def _build(model: type[_ConfigT], **fields: object) -> _ConfigT:
    try:
        return model(**fields)
    except ValidationError as exc:
        messages = "; ".join(err["msg"] for err in exc.errors())
        raise InvalidParameterError(messages) from exc


def run_generator(toolbox: Toolbox, framework: Framework, argv: list[str]) -> float:
    """Run a framework scaffolding CLI and report how long it took.

    Returns:
        Elapsed seconds.

    Raises:
        ProcessFailedError: If the generator fails.
    """
    env = LEGACY_PEER_DEPS_ENV if toolbox.settings.legacy_peer_deps else None
    name = framework.display_name
    start = toolbox.clock()
    with toolbox.console.status(f"Creating a new {name} project (this may take a few minutes)..."):
        output = toolbox.runner.run(argv, cwd=toolbox.filesystem.base, env=env)
    elapsed = toolbox.clock() - start

    print_process_output(toolbox.console, output)
    toolbox.console.print(
        f"[green]Created skeleton {name} project in {elapsed:.2f} seconds[/green]"
    )
    return elapsed


def create_angular_project(options: NewProjectOptions, toolbox: Toolbox) -> AngularConfig:
    name, lint, prettier, template = resolve(
        [QUESTIONS["name"], QUESTIONS["lint"], QUESTIONS["prettier"], QUESTIONS["template"]],
        [options.name, yes_no(options.lint), yes_no(options.prettier), options.template],
        toolbox.prompter,
    )
    config = _build(
        AngularConfig,
        name=name,
        lint=is_yes(lint),
        prettier=is_yes(prettier),
        template=parse_template(template, alpha=options.alpha, beta=options.beta),
    )
    run_generator(toolbox, Framework.angular, angular_new_command(config))
    return config


def create_react_project(options: NewProjectOptions, toolbox: Toolbox) -> ReactConfig:
    """Resolve and generate a create-react-app project.

    Local ``file:`` templates are assumed to be TypeScript and skip the
    language question. The lint question is only asked for TypeScript.
    """
    name, template = resolve(
        [QUESTIONS["name"], QUESTIONS["template"]],
        [options.name, options.template],
        toolbox.prompter,
    )
    selection = parse_template(template, alpha=options.alpha, beta=options.beta)

    language = Language.ts
    if not selection.is_local:
        [language_answer] = resolve([QUESTIONS["language"]], [options.language], toolbox.prompter)
        language = assign_language(language_answer)

    lint = True
    if language == Language.ts:
        [lint_answer] = resolve([QUESTIONS["lint"]], [yes_no(options.lint)], toolbox.prompter)
        lint = is_yes(lint_answer)

    [prettier] = resolve([QUESTIONS["prettier"]], [yes_no(options.prettier)], toolbox.prompter)

    config = _build(
        ReactConfig,
        name=name,
        language=language,
        lint=lint,
        prettier=is_yes(prettier),
        template=selection,
    )
    run_generator(toolbox, Framework.react, react_new_command(config))
    return config


def create_ionic_project(options: NewProjectOptions, toolbox: Toolbox) -> IonicConfig:
    name, lint, prettier = resolve(
        [QUESTIONS["name"], QUESTIONS["lint"], QUESTIONS["prettier"]],
        [options.name, yes_no(options.lint), yes_no(options.prettier)],
        toolbox.prompter,
    )
    config = _build(IonicConfig, name=name, lint=is_yes(lint), prettier=is_yes(prettier))
    run_generator(toolbox, Framework.ionic, ionic_new_command(config))
    return config


def create_react_native_project(options: NewProjectOptions, toolbox: Toolbox) -> ReactNativeConfig:
    """Resolve and generate a React Native project.

    Template selection only applies to the community CLI; Expo projects
    keep ``template=None``.
    """
    [name] = resolve([QUESTIONS["name"]], [options.name], toolbox.prompter)

    [language_answer] = resolve([QUESTIONS["language"]], [options.language], toolbox.prompter)
    language = assign_language(language_answer)

    lint = True
    if language == Language.ts:
        [lint_answer] = resolve([QUESTIONS["lint"]], [yes_no(options.lint)], toolbox.prompter)
        lint = is_yes(lint_answer)

    [prettier] = resolve([QUESTIONS["prettier"]], [yes_no(options.prettier)], toolbox.prompter)

    [cli_answer] = resolve([QUESTIONS["cli"]], [options.cli], toolbox.prompter)
    cli = assign_cli(cli_answer)

    template: TemplateSelection | None = None
    if cli != Cli.expo:
        [template_answer] = resolve([QUESTIONS["template"]], [options.template], toolbox.prompter)
        template = parse_template(template_answer, alpha=options.alpha, beta=options.beta)

    config = _build(
        ReactNativeConfig,
        name=name,
        language=language,
        lint=lint,
        prettier=is_yes(prettier),
        cli=cli,
        template=template,
    )
    run_generator(toolbox, Framework.react_native, react_native_new_command(config))
    return config


CONFIGURATORS: dict[Framework, Callable[[NewProjectOptions, Toolbox], ProjectConfig]] = {
    Framework.angular: create_angular_project,
    Framework.react: create_react_project,
    Framework.ionic: create_ionic_project,
    Framework.react_native: create_react_native_project,
}
