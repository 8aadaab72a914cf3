"""Argument-vector builders for every external command pxb runs.

Each builder is a pure function of its inputs and returns a list of
arguments; nothing here is passed through a shell.
"""

from __future__ import annotations

from collections.abc import Sequence

from pxblue_cli.models.project import (
    AngularConfig,
    IonicConfig,
    ReactConfig,
    ReactNativeConfig,
)
from pxblue_cli.scaffold.mapping import react_template_package

ANGULAR_CLI_PACKAGE = "@angular/cli@^11.0.0"

# Environment that puts npm 7+ into legacy peer-dependency resolution.
LEGACY_PEER_DEPS_ENV: dict[str, str] = {"npm_config_legacy_peer_deps": "true"}


def angular_new_command(config: AngularConfig) -> list[str]:
    return [
        "npx", "-p", ANGULAR_CLI_PACKAGE, "ng", "new", config.name,
        "--directory", config.name, "--style=scss",
    ]


def react_new_command(config: ReactConfig) -> list[str]:
    package = react_template_package(config.template, ts=config.is_ts)
    return ["npx", "create-react-app", config.name, "--template", package]


def ionic_new_command(config: IonicConfig) -> list[str]:
    return ["npx", "ionic", "start", config.name, "blank"]


def react_native_new_command(config: ReactNativeConfig) -> list[str]:
    if config.is_expo:
        template = "expo-template-blank-typescript" if config.is_ts else "blank"
        return [
            "npx", "-p", "expo-cli", "expo", "init",
            f"--name={config.name}", f"--template={template}", config.name,
        ]
    argv = ["npx", "react-native", "init", config.name]
    if config.is_ts:
        argv += ["--template", "react-native-template-typescript"]
    return argv


def install_command(dependencies: Sequence[str], dev: bool, yarn: bool) -> list[str]:
    if yarn:
        return ["yarn", "add", *(["--dev"] if dev else []), *dependencies]
    return ["npm", "install", "--save-dev" if dev else "--save", *dependencies]


def uninstall_command(package: str, yarn: bool) -> list[str]:
    if yarn:
        return ["yarn", "remove", package]
    return ["npm", "uninstall", package]


def run_script_command(script: str, yarn: bool) -> list[str]:
    return ["yarn", script] if yarn else ["npm", "run", script]


def fetch_template_command(package: str, prefix: str) -> list[str]:
    """Install a template package into a throwaway ``--prefix`` folder."""
    return ["npm", "install", package, "--prefix", prefix]


def clone_command(repository: str, destination: str) -> list[str]:
    return ["git", "clone", repository, destination]
