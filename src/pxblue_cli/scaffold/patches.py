"""Patches for files produced by the framework generators.

Every function takes the parsed file content and returns a patched
copy; reading and writing the files is left to the integrator. The
structures assumed here match the layouts emitted by the Angular CLI,
create-react-app, the Ionic CLI and the React Native/Expo CLIs.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping, Sequence
from typing import Any

from pxblue_cli.scaffold.constants import (
    BROWSERS_DEVELOPMENT,
    BROWSERS_PRODUCTION,
    MATERIAL_ICONS_LINK,
    PRETTIER_CONFIG_PACKAGE,
)

JSON = dict[str, Any]

_TITLE_RE = re.compile(r"<title>.*?</title>", re.IGNORECASE | re.DOTALL)
_BODY_RE = re.compile(r"<body>", re.IGNORECASE)
_APP_ROOT_RE = re.compile(r"<app-root>.*?</app-root>", re.IGNORECASE | re.DOTALL)
_NOT_IE11_RE = re.compile(r"^\s*not\s+(IE\s+11)\b.*$", re.IGNORECASE)
_IE11_RE = re.compile(r"^\s*IE\s+11\b", re.IGNORECASE)


# -- package.json ------------------------------------------------------------


def update_scripts(package_json: Mapping[str, Any], scripts: Mapping[str, str]) -> JSON:
    """Merge scripts into ``package.json``; same-named scripts are replaced."""
    patched = copy.deepcopy(dict(package_json))
    merged = dict(patched.get("scripts") or {})
    merged.update(scripts)
    patched["scripts"] = merged
    return patched


def set_prettier_config(package_json: Mapping[str, Any]) -> JSON:
    """Point the project's prettier config at the shared PX Blue config."""
    patched = copy.deepcopy(dict(package_json))
    patched["prettier"] = PRETTIER_CONFIG_PACKAGE
    return patched


def update_browserslist_json(package_json: Mapping[str, Any]) -> JSON:
    """Replace the ``browserslist`` block of a create-react-app manifest."""
    patched = copy.deepcopy(dict(package_json))
    patched["browserslist"] = {
        "production": BROWSERS_PRODUCTION + ["ie 11"],
        "development": BROWSERS_DEVELOPMENT + ["ie 11"],
    }
    return patched


# -- .browserslistrc ---------------------------------------------------------


def update_browserslist_file(content: str) -> str:
    """Opt the Angular browserslist into IE 11 support.

    Comment lines and other targets are kept, including the deprecated
    ``not IE 9-10`` exclusion. A ``not IE 11`` entry loses its ``not``;
    IE 11 is appended when the file never mentioned it.
    """
    lines: list[str] = []
    has_ie11 = False
    for line in content.splitlines():
        match = _NOT_IE11_RE.match(line)
        if match:
            line = match.group(1)
        if _IE11_RE.match(line):
            has_ie11 = True
        lines.append(line)
    if not has_ie11:
        lines.append("IE 11")
    return "\n".join(lines) + "\n"


# -- index.html --------------------------------------------------------------


def patch_title(html: str, name: str, icon_link: bool = False) -> str:
    """Set the page title, optionally followed by the Material Icons link."""
    replacement = f"<title>{name}</title>"
    if icon_link:
        replacement += f"\n    {MATERIAL_ICONS_LINK}"
    return _TITLE_RE.sub(lambda _: replacement, html)


def replace_body_tag(html: str, markup: str) -> str:
    return _BODY_RE.sub(lambda _: markup, html)


def replace_app_root(html: str, markup: str) -> str:
    return _APP_ROOT_RE.sub(lambda _: markup, html)


# -- angular.json ------------------------------------------------------------


def _architect(angular_json: JSON, project: str) -> JSON:
    return angular_json["projects"][project]["architect"]


def set_angular_styles(angular_json: Mapping[str, Any], project: str, styles: Sequence[Any]) -> JSON:
    """Set the global style list for the build and (if present) test targets."""
    patched = copy.deepcopy(dict(angular_json))
    architect = _architect(patched, project)
    for target in ("build", "test"):
        if target in architect:
            architect[target].setdefault("options", {})["styles"] = list(styles)
    return patched


def add_es5_configuration(angular_json: Mapping[str, Any], project: str) -> JSON:
    """Add an ``es5`` build/serve configuration for legacy browsers."""
    patched = copy.deepcopy(dict(angular_json))
    architect = _architect(patched, project)
    architect["build"].setdefault("configurations", {})["es5"] = {"tsConfig": "./tsconfig.es5.json"}
    architect["serve"].setdefault("configurations", {})["es5"] = {"browserTarget": f"{project}:build:es5"}
    return patched


def remove_lint_target(angular_json: Mapping[str, Any], project: str) -> JSON:
    """Drop the tslint-based ``lint`` architect target."""
    patched = copy.deepcopy(dict(angular_json))
    _architect(patched, project).pop("lint", None)
    return patched


# -- app.json (Expo) ---------------------------------------------------------


def merge_packager_opts(app_json: Mapping[str, Any], helper_app_json: Mapping[str, Any]) -> JSON:
    """Copy ``expo.packagerOpts`` (svg transformer setup) from the helper app.json."""
    patched = copy.deepcopy(dict(app_json))
    packager_opts = helper_app_json.get("expo", {}).get("packagerOpts")
    if packager_opts is not None:
        patched.setdefault("expo", {})["packagerOpts"] = copy.deepcopy(packager_opts)
    return patched
