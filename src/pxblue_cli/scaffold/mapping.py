"""Map free-form answers onto the closed language, CLI and template sets."""

from __future__ import annotations

import re

from pxblue_cli.models.project import Cli, Language, Template, TemplateSelection

LOCAL_TEMPLATE_PREFIX = "file:"

_JS_TOKENS: frozenset[str] = frozenset({"js", "javascript"})

_TEMPLATE_TOKENS: dict[str, Template] = {
    "blank": Template.blank,
    "routing": Template.routing,
    "basic routing": Template.routing,
    "authentication": Template.authentication,
}


def assign_language(value: str | None) -> Language:
    """Return JS only for an exact (case-insensitive) JS token, else TS."""
    if value and value.strip().lower() in _JS_TOKENS:
        return Language.js
    return Language.ts


def assign_cli(value: str | None) -> Cli:
    """Return Expo for any spelling of "expo", else the community CLI."""
    if value and re.sub(r"\s+", "", value).lower() == "expo":
        return Cli.expo
    return Cli.rnc


def yes_no(value: bool | None) -> str | None:
    """Turn a boolean flag into a prefilled answer; None stays unset."""
    if value is None:
        return None
    return "Yes" if value else "No"


def is_yes(answer: str) -> bool:
    return answer.strip().lower() in ("yes", "y", "true")


def parse_template(token: str | None, alpha: bool = False, beta: bool = False) -> TemplateSelection:
    """Parse a template token such as ``"Basic Routing"`` or ``"blank@1.2.0"``.

    ``file:`` references pass through verbatim with no version. Unknown
    names fall back to the blank template. The ``@`` suffix wins over
    the alpha/beta flags.
    """
    token = (token or "").strip()
    if token.startswith(LOCAL_TEMPLATE_PREFIX):
        return TemplateSelection(template=Template.local, reference=token)

    base, _, suffix = token.partition("@")
    version = suffix.strip() or ("alpha" if alpha else "beta" if beta else "")
    template = _TEMPLATE_TOKENS.get(base.strip().lower(), Template.blank)
    return TemplateSelection(template=template, version=version)


def react_template_package(selection: TemplateSelection, ts: bool) -> str:
    """create-react-app template for a selection, with version suffix."""
    if selection.is_local:
        return selection.reference
    suffix = "-typescript" if ts else ""
    return f"@pxblue/{selection.template.value}{suffix}{selection.version_suffix}"


def angular_template_package(selection: TemplateSelection) -> str:
    """npm package holding the Angular template files (no version)."""
    return f"@pxblue/angular-template-{selection.template.value}"


def react_native_template_package(selection: TemplateSelection, ts: bool) -> str:
    """npm package holding the React Native template files (no version)."""
    suffix = "-typescript" if ts else ""
    return f"@pxblue/react-native-template-{selection.template.value}{suffix}"
