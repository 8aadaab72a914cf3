"""pxb data models - re-exports all public model classes."""

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
    Template,
    TemplateSelection,
)
from pxblue_cli.models.questions import QUESTIONS, InputKind, QuestionSpec
from pxblue_cli.models.settings import CliSettings, load_settings

__all__ = [
    "AngularConfig",
    "Cli",
    "CliSettings",
    "Framework",
    "InputKind",
    "IonicConfig",
    "Language",
    "NewProjectOptions",
    "ProjectConfig",
    "QUESTIONS",
    "QuestionSpec",
    "ReactConfig",
    "ReactNativeConfig",
    "Template",
    "TemplateSelection",
    "load_settings",
]
