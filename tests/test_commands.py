"""Tests for pxblue_cli.scaffold.commands - argv builders."""

from __future__ import annotations

from pxblue_cli.models.project import (
    AngularConfig,
    Cli,
    IonicConfig,
    Language,
    ReactConfig,
    ReactNativeConfig,
)
from pxblue_cli.scaffold.commands import (
    angular_new_command,
    clone_command,
    fetch_template_command,
    install_command,
    ionic_new_command,
    react_native_new_command,
    react_new_command,
    run_script_command,
    uninstall_command,
)
from pxblue_cli.scaffold.mapping import parse_template


def test_angular_command() -> None:
    argv = angular_new_command(AngularConfig(name="demo"))
    assert argv == [
        "npx", "-p", "@angular/cli@^11.0.0", "ng", "new", "demo",
        "--directory", "demo", "--style=scss",
    ]


def test_react_command_uses_typescript_template() -> None:
    config = ReactConfig(name="demo", template=parse_template("routing", beta=True))
    assert react_new_command(config) == [
        "npx", "create-react-app", "demo", "--template", "@pxblue/routing-typescript@beta",
    ]


def test_react_command_javascript() -> None:
    config = ReactConfig(name="demo", language=Language.js, template=parse_template("blank"))
    assert react_new_command(config)[-1] == "@pxblue/blank"


def test_ionic_command() -> None:
    assert ionic_new_command(IonicConfig(name="demo")) == ["npx", "ionic", "start", "demo", "blank"]


def test_react_native_expo_command() -> None:
    ts = ReactNativeConfig(name="demo", cli=Cli.expo)
    js = ReactNativeConfig(name="demo", cli=Cli.expo, language=Language.js)
    assert react_native_new_command(ts) == [
        "npx", "-p", "expo-cli", "expo", "init",
        "--name=demo", "--template=expo-template-blank-typescript", "demo",
    ]
    assert "--template=blank" in react_native_new_command(js)


def test_react_native_community_command() -> None:
    ts = ReactNativeConfig(name="demo", cli=Cli.rnc)
    js = ReactNativeConfig(name="demo", cli=Cli.rnc, language=Language.js)
    assert react_native_new_command(ts) == [
        "npx", "react-native", "init", "demo", "--template", "react-native-template-typescript",
    ]
    assert react_native_new_command(js) == ["npx", "react-native", "init", "demo"]


def test_names_with_spaces_stay_single_arguments() -> None:
    """Names are passed as one argv element; no shell splitting."""
    argv = ionic_new_command(IonicConfig(name="my app; rm -rf"))
    assert argv[3] == "my app; rm -rf"


def test_package_manager_commands() -> None:
    assert install_command(["a", "b"], dev=True, yarn=True) == ["yarn", "add", "--dev", "a", "b"]
    assert install_command(["a"], dev=False, yarn=True) == ["yarn", "add", "a"]
    assert install_command(["a"], dev=True, yarn=False) == ["npm", "install", "--save-dev", "a"]
    assert install_command(["a"], dev=False, yarn=False) == ["npm", "install", "--save", "a"]
    assert uninstall_command("tslint", yarn=True) == ["yarn", "remove", "tslint"]
    assert uninstall_command("tslint", yarn=False) == ["npm", "uninstall", "tslint"]
    assert run_script_command("rnlink", yarn=True) == ["yarn", "rnlink"]
    assert run_script_command("rnlink", yarn=False) == ["npm", "run", "rnlink"]


def test_fetch_and_clone_commands() -> None:
    assert fetch_template_command("@pxblue/x@beta", "template-1") == [
        "npm", "install", "@pxblue/x@beta", "--prefix", "template-1",
    ]
    assert clone_command("https://example.com/repo", "dest") == [
        "git", "clone", "https://example.com/repo", "dest",
    ]
