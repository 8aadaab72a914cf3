"""Shared fixtures: fake collaborators and generated-project layouts."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
from rich.console import Console

from pxblue_cli.errors import ProcessFailedError
from pxblue_cli.models.settings import CliSettings
from pxblue_cli.toolbox.context import Toolbox
from pxblue_cli.toolbox.filesystem import ProjectFilesystem
from pxblue_cli.toolbox.prompt import PromptRequest


@dataclass
class RunCall:
    argv: list[str]
    cwd: Path | None
    env: dict[str, str] | None


@dataclass
class FakeRunner:
    """Records every command; optional handler simulates side effects."""

    handler: Callable[[list[str], Path | None], str | None] | None = None
    fail_on: tuple[str, ...] = ()
    calls: list[RunCall] = field(default_factory=list)

    def run(self, argv, cwd=None, env=None) -> str:
        argv = list(argv)
        self.calls.append(RunCall(argv, Path(cwd) if cwd is not None else None, dict(env) if env else None))
        command = " ".join(argv)
        for needle in self.fail_on:
            if needle in command:
                raise ProcessFailedError(argv, 1, output=f"boom: {command}")
        if self.handler is not None:
            return self.handler(argv, Path(cwd) if cwd is not None else None) or ""
        return ""

    @property
    def commands(self) -> list[str]:
        return [" ".join(call.argv) for call in self.calls]


@dataclass
class ScriptedPrompter:
    """Answers prompt rounds from a queue; records each batch it was asked."""

    responses: list[dict[str, str] | None] = field(default_factory=list)
    batches: list[list[PromptRequest]] = field(default_factory=list)

    def ask(self, batch: list[PromptRequest]) -> dict[str, str] | None:
        self.batches.append(list(batch))
        if not self.responses:
            raise AssertionError(f"Unexpected prompt round: {[r.message for r in batch]}")
        return self.responses.pop(0)

    @property
    def asked(self) -> list[str]:
        return [request.message for batch in self.batches for request in batch]


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _strip_version(spec: str) -> str:
    at = spec.rfind("@")
    return spec[:at] if at > 0 else spec


def template_installer(argv: list[str], cwd: Path | None) -> str | None:
    """Simulate ``npm install <template> --prefix <dir>`` and ``git clone``."""
    if argv[:2] == ["npm", "install"] and "--prefix" in argv and cwd is not None:
        package = _strip_version(argv[2])
        prefix = argv[argv.index("--prefix") + 1]
        root = cwd / prefix / "node_modules" / package
        _write(root / "template" / "app.component.ts", "// template component\n")
        _write(root / "template" / "App.tsx", "// template app\n")
        _write(root / "assets" / "logo.svg", "<svg/>")
        _write(root / "fonts" / "OpenSans.ttf", "font")
        _write(root / "images" / "splash.png", "png")
        manifest = {"dependencies": ["@pxblue/angular-components"], "devDependencies": ["@types/jest"]}
        _write_json(root / "template-dependencies.json", manifest)
        _write_json(root / "dependencies.json", manifest)
        return "added 1 package"
    if argv[:2] == ["git", "clone"] and cwd is not None:
        helper = cwd / argv[3]
        _write(helper / "fonts" / "OpenSans-Regular.ttf", "font")
        _write(helper / "react-native" / "expo" / "App.tsx", "// expo app tsx\n")
        _write(helper / "react-native" / "expo" / "App.js", "// expo app js\n")
        _write_json(
            helper / "react-native" / "expo" / "app.json",
            {"expo": {"packagerOpts": {"config": "metro.config.js"}}},
        )
        _write(helper / "react-native" / "rnc" / "metro.config.js", "module.exports = {};\n")
        return "Cloning into..."
    return None


ANGULAR_INDEX = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Demo</title>
</head>
<body>
  <app-root></app-root>
</body>
</html>
"""

IONIC_INDEX = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Ionic App</title>
</head>
<body>
  <app-root></app-root>
</body>
</html>
"""

REACT_INDEX = """<!DOCTYPE html>
<html lang="en">
  <head>
    <title>React App</title>
  </head>
  <body>
    <div id="root"></div>
  </body>
</html>
"""

BROWSERSLISTRC = """# This file is used by the build system to adjust CSS and JS output.
last 1 Chrome version
last 1 Firefox version
Firefox ESR
not IE 9-10 # Angular support for IE 9-10 has been deprecated and will be removed as of Angular v11.
not IE 11 # Angular supports IE 11 only as an opt-in.
"""


def make_angular_project(base: Path, name: str, tslint: bool = True) -> Path:
    root = base / name
    _write_json(root / "package.json", {"name": name, "scripts": {"ng": "ng", "start": "ng serve"}})
    _write_json(
        root / "angular.json",
        {
            "projects": {
                name: {
                    "architect": {
                        "build": {"options": {"styles": ["src/styles.scss"]}, "configurations": {}},
                        "serve": {"configurations": {}},
                        "test": {"options": {"styles": ["src/styles.scss"]}},
                        "lint": {"builder": "@angular-devkit/build-angular:tslint"},
                    }
                }
            }
        },
    )
    _write(root / ".browserslistrc", BROWSERSLISTRC)
    _write(root / "src" / "index.html", ANGULAR_INDEX)
    _write(root / "src" / "styles.scss", "/* generated */\n")
    if tslint:
        _write_json(root / "tslint.json", {"rules": {}})
    return root


def make_react_project(base: Path, name: str) -> Path:
    root = base / name
    _write_json(
        root / "package.json",
        {
            "name": name,
            "scripts": {"start": "react-scripts start"},
            "browserslist": {"production": [">0.2%"], "development": ["last 1 chrome version"]},
        },
    )
    _write(root / "public" / "index.html", REACT_INDEX)
    return root


def make_ionic_project(base: Path, name: str) -> Path:
    root = base / name
    _write_json(root / "package.json", {"name": name, "scripts": {"ng": "ng"}})
    _write_json(
        root / "angular.json",
        {"projects": {"app": {"architect": {"build": {"options": {"styles": []}}}}}},
    )
    _write(root / "src" / "index.html", IONIC_INDEX)
    return root


def make_react_native_project(base: Path, name: str, expo: bool = False) -> Path:
    root = base / name
    _write_json(root / "package.json", {"name": name, "scripts": {"start": "react-native start"}})
    if expo:
        _write_json(root / "app.json", {"expo": {"name": name, "slug": name}})
    else:
        _write(root / "android" / "app" / "build.gradle", "apply plugin: 'com.android.application'")
    return root


@pytest.fixture
def console() -> Console:
    return Console(file=StringIO(), width=120, force_terminal=False)


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner(handler=template_installer)


@pytest.fixture
def toolbox(tmp_path: Path, runner: FakeRunner, prompter: ScriptedPrompter, console: Console) -> Toolbox:
    ticks = iter(range(0, 10_000, 2))
    return Toolbox(
        runner=runner,
        prompter=prompter,
        filesystem=ProjectFilesystem(tmp_path),
        console=console,
        settings=CliSettings(),
        clock=lambda: float(next(ticks)),
    )


def console_text(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture
def output_of() -> Callable[[Console], str]:
    return console_text


@pytest.fixture
def projects(tmp_path: Path) -> SimpleNamespace:
    """Builders for the file layouts each framework generator leaves behind."""
    return SimpleNamespace(
        angular=lambda name, **kw: make_angular_project(tmp_path, name, **kw),
        react=lambda name: make_react_project(tmp_path, name),
        ionic=lambda name: make_ionic_project(tmp_path, name),
        react_native=lambda name, **kw: make_react_native_project(tmp_path, name, **kw),
    )
