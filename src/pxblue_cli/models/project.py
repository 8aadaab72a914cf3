"""Project configuration records built by the configurator.

Each supported framework gets its own frozen record. The integrator
receives one of these and never mutates it.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field, field_validator


class Framework(str, Enum):
    """The closed set of frameworks pxb can scaffold."""

    angular = "angular"
    react = "react"
    ionic = "ionic"
    react_native = "react-native"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[Framework, str] = {
    Framework.angular: "Angular",
    Framework.react: "React",
    Framework.ionic: "Ionic",
    Framework.react_native: "React Native",
}


class Language(str, Enum):
    """Source language of the generated project."""

    js = "js"
    ts = "ts"


class Cli(str, Enum):
    """Generator used for React Native projects."""

    expo = "expo"
    rnc = "rnc"


class Template(str, Enum):
    """PX Blue starter templates."""

    blank = "blank"
    routing = "routing"
    authentication = "authentication"
    local = "local"


class TemplateSelection(BaseModel):
    """A resolved template choice.

    ``reference`` holds the raw ``file:`` token for local templates;
    ``version`` is the npm dist-tag or version to fetch, if any.
    """

    model_config = {"extra": "forbid", "frozen": True}

    template: Template = Template.blank
    version: str = ""
    reference: str = ""

    @property
    def is_local(self) -> bool:
        return self.template == Template.local

    @property
    def version_suffix(self) -> str:
        """Return ``@<version>`` or an empty string."""
        return f"@{self.version}" if self.version else ""

    @property
    def local_path(self) -> str:
        """Path portion of a ``file:`` reference."""
        return self.reference[len("file:"):] if self.is_local else ""


class _BaseProjectConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(min_length=1)
    lint: bool = True
    prettier: bool = True

    @field_validator("name")
    @classmethod
    def _name_is_directory_name(cls, value: str) -> str:
        # Used as both the project directory and the npm package name.
        value = value.strip()
        if not value or value in (".", "..") or any(sep in value for sep in ("/", "\\")):
            raise ValueError(f"'{value}' is not a valid project name")
        return value


class AngularConfig(_BaseProjectConfig):
    framework: Literal[Framework.angular] = Framework.angular
    template: TemplateSelection = Field(default_factory=TemplateSelection)


class ReactConfig(_BaseProjectConfig):
    framework: Literal[Framework.react] = Framework.react
    language: Language = Language.ts
    template: TemplateSelection = Field(default_factory=TemplateSelection)

    @property
    def is_ts(self) -> bool:
        return self.language == Language.ts


class IonicConfig(_BaseProjectConfig):
    framework: Literal[Framework.ionic] = Framework.ionic


class ReactNativeConfig(_BaseProjectConfig):
    """React Native project record.

    ``template`` stays None for Expo projects: Expo skips template
    selection and uses the helper-repo asset pipeline instead.
    """

    framework: Literal[Framework.react_native] = Framework.react_native
    language: Language = Language.ts
    cli: Cli = Cli.rnc
    template: TemplateSelection | None = None

    @property
    def is_ts(self) -> bool:
        return self.language == Language.ts

    @property
    def is_expo(self) -> bool:
        return self.cli == Cli.expo


ProjectConfig = Union[AngularConfig, ReactConfig, IonicConfig, ReactNativeConfig]


class NewProjectOptions(BaseModel):
    """Flags passed to a ``pxb new`` command.

    ``None`` means the flag was not given and the value must be asked
    for interactively.
    """

    model_config = {"extra": "forbid", "frozen": True}

    name: str | None = None
    language: str | None = None
    lint: bool | None = None
    prettier: bool | None = None
    template: str | None = None
    cli: str | None = None
    alpha: bool = False
    beta: bool = False
