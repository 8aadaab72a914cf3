"""Integrate PX Blue into a freshly generated project.

One routine per framework. Each is a straight sequence of installs,
file copies and patches run inside numbered steps; the success banner
is only printed once every step has completed. Nothing is rolled back
when a step fails: the project is left as the failing step found it.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from pxblue_cli.cli.output import (
    print_instructions,
    print_process_output,
    print_success,
    print_warning,
)
from pxblue_cli.errors import IntegrationStepError, ProcessFailedError
from pxblue_cli.models.project import (
    AngularConfig,
    Framework,
    IonicConfig,
    ProjectConfig,
    ReactConfig,
    ReactNativeConfig,
    TemplateSelection,
)
from pxblue_cli.scaffold import constants as C
from pxblue_cli.scaffold import patches
from pxblue_cli.scaffold.commands import (
    clone_command,
    fetch_template_command,
    run_script_command,
    uninstall_command,
)
from pxblue_cli.scaffold.dependencies import (
    add_lint_config,
    dependency_list,
    install_dependencies,
    uses_yarn,
)
from pxblue_cli.scaffold.mapping import (
    angular_template_package,
    react_native_template_package,
)
from pxblue_cli.toolbox.context import Toolbox

# Errors that abort a step: failed commands, missing or unreadable files,
# undecodable text or JSON (ValueError), and generated files that do not
# have the expected structure.
_STEP_ERRORS: tuple[type[Exception], ...] = (
    ProcessFailedError,
    OSError,
    ValueError,
    KeyError,
    TypeError,
    AttributeError,
)


class IntegrationSteps:
    """Numbers integration steps and tags failures with the step number."""

    def __init__(self) -> None:
        self.count = 0
        self.completed: list[str] = []

    @contextmanager
    def step(self, description: str) -> Iterator[None]:
        self.count += 1
        try:
            yield
        except _STEP_ERRORS as exc:
            raise IntegrationStepError(self.count, description, exc) from exc
        self.completed.append(description)


@dataclass(frozen=True)
class FetchedTemplate:
    """Location of template package contents on disk.

    ``cleanup`` is the temporary install folder to delete afterwards,
    or None for local templates that were read in place.
    """

    root: str
    cleanup: str | None = None


def _timestamp() -> int:
    return time.time_ns() // 1_000_000


@contextmanager
def fetch_template(
    toolbox: Toolbox,
    folder: str,
    package: str,
    selection: TemplateSelection,
) -> Iterator[FetchedTemplate]:
    """Make a template package's contents available on disk.

    Remote packages are npm-installed into a throwaway prefix folder
    inside the project; the folder is removed on exit, including when
    the install or the work done with the template fails. Local
    ``file:`` references are used in place and never removed.
    """
    if selection.is_local:
        yield FetchedTemplate(root=selection.local_path)
        return

    prefix = f"template-{_timestamp()}"
    cleanup = f"{folder}/{prefix}"
    argv = fetch_template_command(f"{package}{selection.version_suffix}", prefix)
    try:
        with toolbox.console.status("Fetching PX Blue template..."):
            toolbox.runner.run(argv, cwd=toolbox.filesystem.path(folder))
        yield FetchedTemplate(root=f"{cleanup}/node_modules/{package}", cleanup=cleanup)
    finally:
        toolbox.filesystem.remove(cleanup)


def _install_template_dependencies(
    toolbox: Toolbox,
    folder: str,
    manifest_path: str,
) -> None:
    manifest = toolbox.filesystem.read_json(manifest_path)
    install_dependencies(
        toolbox, folder, dependency_list(manifest.get("dependencies")),
        dev=False, description="PX Blue Template Dependencies",
    )
    install_dependencies(
        toolbox, folder, dependency_list(manifest.get("devDependencies")),
        dev=True, description="PX Blue Template DevDependencies",
    )


def _patch_json(toolbox: Toolbox, path: str, *patchers: Callable[[dict], dict]) -> None:
    data = toolbox.filesystem.read_json(path)
    for patcher in patchers:
        data = patcher(data)
    toolbox.filesystem.write_json(path, data)


def _package_manager(yarn: bool) -> str:
    return "yarn" if yarn else "npm"


# -- Angular -----------------------------------------------------------------


def add_pxblue_angular(config: AngularConfig, toolbox: Toolbox) -> None:
    name = config.name
    folder = name
    fs = toolbox.filesystem
    yarn = uses_yarn(toolbox, folder)
    steps = IntegrationSteps()

    if config.lint:
        with steps.step("ESLint configuration"):
            install_dependencies(
                toolbox, folder, C.LINT_DEPENDENCIES[Framework.angular],
                dev=True, description="PX Blue ESLint Packages",
            )
            add_lint_config(toolbox, folder, C.LINT_CONFIG_TS)

        if fs.exists(f"{folder}/tslint.json"):
            with steps.step("TSLint removal"):
                fs.remove(f"{folder}/tslint.json")
                output = toolbox.runner.run(uninstall_command("tslint", yarn), cwd=fs.path(folder))
                print_process_output(toolbox.console, output)
                if fs.exists(f"{folder}/angular.json"):
                    _patch_json(
                        toolbox, f"{folder}/angular.json",
                        lambda data: patches.remove_lint_target(data, name),
                    )

    if config.prettier:
        with steps.step("Prettier configuration"):
            install_dependencies(
                toolbox, folder, C.PRETTIER_DEPENDENCIES[Framework.angular],
                dev=True, description="PX Blue Prettier Packages",
            )

    with steps.step("PX Blue template"):
        package = angular_template_package(config.template)
        with fetch_template(toolbox, folder, package, config.template) as fetched:
            with toolbox.console.status("Adding PX Blue template..."):
                fs.copy(f"{fetched.root}/template", f"{folder}/src/app", overwrite=True)
                if fs.is_dir(f"{fetched.root}/assets"):
                    fs.copy(f"{fetched.root}/assets", f"{folder}/src/assets", overwrite=True)
            _install_template_dependencies(toolbox, folder, f"{fetched.root}/template-dependencies.json")

    with steps.step("final cleanup"), toolbox.console.status("Performing some final cleanup..."):
        scripts = dict(C.SCRIPTS[Framework.angular])
        if config.lint:
            scripts.update(C.LINT_SCRIPTS[Framework.angular])
        if config.prettier:
            scripts.update(C.PRETTIER_SCRIPTS[Framework.angular])
        package_patchers = [lambda data: patches.update_scripts(data, scripts)]
        if config.prettier:
            package_patchers.append(patches.set_prettier_config)
        _patch_json(toolbox, f"{folder}/package.json", *package_patchers)

        browsers = fs.read_text(f"{folder}/.browserslistrc")
        fs.write_text(f"{folder}/.browserslistrc", patches.update_browserslist_file(browsers))

        html = fs.read_text(f"{folder}/src/index.html")
        html = patches.patch_title(html, name, icon_link=True)
        html = patches.replace_body_tag(html, C.ROOT_COMPONENT[Framework.angular])
        fs.write_text(f"{folder}/src/index.html", html)

        _patch_json(
            toolbox, f"{folder}/angular.json",
            lambda data: patches.set_angular_styles(data, name, C.ANGULAR_THEME_STYLES),
            lambda data: patches.add_es5_configuration(data, name),
        )
        fs.write_json(f"{folder}/tsconfig.es5.json", C.TSCONFIG_ES5)

        fs.remove(f"{folder}/src/styles.scss")
        fs.write_text(f"{folder}/src/styles.scss", C.ANGULAR_STYLES)

    print_success(toolbox.console, name)
    print_instructions(toolbox.console, [f"cd {name}", f"{_package_manager(yarn)} start --open"])


# -- React -------------------------------------------------------------------


def add_pxblue_react(config: ReactConfig, toolbox: Toolbox) -> None:
    name = config.name
    folder = name
    fs = toolbox.filesystem
    yarn = uses_yarn(toolbox, folder)
    lint = config.lint and config.is_ts
    steps = IntegrationSteps()

    if lint:
        with steps.step("ESLint configuration"):
            install_dependencies(
                toolbox, folder, C.LINT_DEPENDENCIES[Framework.react],
                dev=True, description="PX Blue ESLint Packages",
            )
            add_lint_config(toolbox, folder, C.LINT_CONFIG_TSX)

    if config.prettier:
        with steps.step("Prettier configuration"):
            install_dependencies(
                toolbox, folder, C.PRETTIER_DEPENDENCIES[Framework.react],
                dev=True, description="PX Blue Prettier Packages",
            )

    with steps.step("final cleanup"), toolbox.console.status("Performing some final cleanup..."):
        scripts = dict(C.SCRIPTS[Framework.react])
        if lint:
            scripts.update(C.LINT_SCRIPTS[Framework.react])
        if config.prettier:
            scripts.update(C.PRETTIER_SCRIPTS[Framework.react])
        package_patchers = [
            lambda data: patches.update_scripts(data, scripts),
            patches.update_browserslist_json,
        ]
        if config.prettier:
            package_patchers.append(patches.set_prettier_config)
        _patch_json(toolbox, f"{folder}/package.json", *package_patchers)

        html = fs.read_text(f"{folder}/public/index.html")
        fs.write_text(f"{folder}/public/index.html", patches.patch_title(html, name))

    print_success(toolbox.console, name)
    print_instructions(toolbox.console, [f"cd {name}", f"{_package_manager(yarn)} start"])


# -- Ionic -------------------------------------------------------------------


def add_pxblue_ionic(config: IonicConfig, toolbox: Toolbox) -> None:
    name = config.name
    folder = name
    fs = toolbox.filesystem
    steps = IntegrationSteps()

    with steps.step("PX Blue dependencies"):
        install_dependencies(
            toolbox, folder, C.DEPENDENCIES[Framework.ionic],
            dev=False, description="PX Blue Ionic Dependencies",
        )
        install_dependencies(
            toolbox, folder, C.DEV_DEPENDENCIES[Framework.ionic],
            dev=True, description="PX Blue Ionic Dev Dependencies",
        )

    if config.lint:
        with steps.step("ESLint configuration"):
            install_dependencies(
                toolbox, folder, C.LINT_DEPENDENCIES[Framework.ionic],
                dev=True, description="PX Blue ESLint Packages",
            )
            add_lint_config(toolbox, folder, C.LINT_CONFIG_TS)

    if config.prettier:
        with steps.step("Prettier configuration"):
            install_dependencies(
                toolbox, folder, C.PRETTIER_DEPENDENCIES[Framework.ionic],
                dev=True, description="PX Blue Prettier Packages",
            )

    with steps.step("final cleanup"), toolbox.console.status("Performing some final cleanup..."):
        scripts = dict(C.SCRIPTS[Framework.ionic])
        if config.lint:
            scripts.update(C.LINT_SCRIPTS[Framework.ionic])
        if config.prettier:
            scripts.update(C.PRETTIER_SCRIPTS[Framework.ionic])
        package_patchers = [lambda data: patches.update_scripts(data, scripts)]
        if config.prettier:
            package_patchers.append(patches.set_prettier_config)
        _patch_json(toolbox, f"{folder}/package.json", *package_patchers)

        html = fs.read_text(f"{folder}/src/index.html")
        html = patches.patch_title(html, name, icon_link=True)
        html = patches.replace_app_root(html, C.ROOT_COMPONENT[Framework.ionic])
        fs.write_text(f"{folder}/src/index.html", html)

        # Ionic's angular.json always names its project "app".
        _patch_json(
            toolbox, f"{folder}/angular.json",
            lambda data: patches.set_angular_styles(data, "app", C.IONIC_THEME_STYLES),
        )

    print_success(toolbox.console, name)
    print_instructions(toolbox.console, [f"cd {name}", "ionic serve"])


# -- React Native ------------------------------------------------------------


def _add_react_native_template(
    config: ReactNativeConfig,
    toolbox: Toolbox,
    steps: IntegrationSteps,
) -> None:
    folder = config.name
    fs = toolbox.filesystem
    selection = config.template or TemplateSelection()

    with steps.step("PX Blue template"):
        package = react_native_template_package(selection, ts=config.is_ts)
        with fetch_template(toolbox, folder, package, selection) as fetched:
            with toolbox.console.status("Adding PX Blue template..."):
                fs.copy(f"{fetched.root}/template", folder, overwrite=True)
                if fs.is_dir(f"{fetched.root}/fonts"):
                    fs.copy(f"{fetched.root}/fonts", f"{folder}/assets/fonts", overwrite=True)
                if fs.is_dir(f"{fetched.root}/images"):
                    fs.copy(f"{fetched.root}/images", f"{folder}/assets/images", overwrite=True)
            _install_template_dependencies(toolbox, folder, f"{fetched.root}/dependencies.json")

        fs.append_text(f"{folder}/android/app/build.gradle", C.VECTOR_ICONS_GRADLE)


def _add_expo_assets(config: ReactNativeConfig, toolbox: Toolbox, steps: IntegrationSteps) -> None:
    folder = config.name
    fs = toolbox.filesystem
    app_file = f"App.{'tsx' if config.is_ts else 'js'}"

    with steps.step("Expo dependencies"):
        install_dependencies(
            toolbox, folder,
            C.DEPENDENCIES[Framework.react_native] + C.EXPO_EXTRA_DEPENDENCIES,
            dev=False, description="PX Blue React Native Dependencies",
        )
        install_dependencies(
            toolbox, folder,
            C.DEV_DEPENDENCIES[Framework.react_native] + C.EXPO_EXTRA_DEV_DEPENDENCIES,
            dev=True, description="PX Blue React Native Dev Dependencies",
        )

    with steps.step("Expo helper files"), toolbox.console.status("Adding Expo files..."):
        # Cloned beside the project; removed even when a later copy fails.
        helper = f"cli-helpers-{_timestamp()}"
        try:
            toolbox.runner.run(clone_command(toolbox.settings.helpers_repo, helper), cwd=fs.base)

            fs.mkdir(f"{folder}/assets")
            fs.copy(f"{helper}/fonts", f"{folder}/assets/fonts", overwrite=True)
            fs.copy(f"{helper}/react-native/expo/{app_file}", f"{folder}/{app_file}", overwrite=True)

            helper_app_json = fs.read_json(f"{helper}/react-native/expo/app.json")
            _patch_json(
                toolbox, f"{folder}/app.json",
                lambda data: patches.merge_packager_opts(data, helper_app_json),
            )
            fs.copy(f"{helper}/react-native/rnc/metro.config.js", f"{folder}/metro.config.js", overwrite=True)
        finally:
            fs.remove(helper)


def add_pxblue_react_native(config: ReactNativeConfig, toolbox: Toolbox) -> None:
    """Integrate PX Blue into a React Native project.

    Community CLI projects get a PX Blue template package and a
    native-module link step; Expo projects get fonts, an App component
    and svg-transformer config from the CLI helpers repository instead.
    """
    name = config.name
    folder = name
    fs = toolbox.filesystem
    yarn = uses_yarn(toolbox, folder)
    lint = config.lint and config.is_ts
    steps = IntegrationSteps()

    if config.is_expo:
        _add_expo_assets(config, toolbox, steps)
    else:
        _add_react_native_template(config, toolbox, steps)

    if lint:
        with steps.step("ESLint configuration"):
            install_dependencies(
                toolbox, folder, C.LINT_DEPENDENCIES[Framework.react_native],
                dev=True, description="PX Blue ESLint Packages",
            )
            add_lint_config(toolbox, folder, C.LINT_CONFIG_TSX)

    if config.prettier:
        with steps.step("Prettier configuration"):
            install_dependencies(
                toolbox, folder, C.PRETTIER_DEPENDENCIES[Framework.react_native],
                dev=True, description="PX Blue Prettier Packages",
            )
            fs.write_text(f"{folder}/.prettierignore", C.PRETTIER_IGNORE)

    with steps.step("final cleanup"), toolbox.console.status("Performing some final cleanup..."):
        scripts = dict(C.SCRIPTS[Framework.react_native])
        if lint:
            scripts.update(C.LINT_SCRIPTS[Framework.react_native])
        if config.prettier:
            scripts.update(C.PRETTIER_SCRIPTS[Framework.react_native])
        scripts["test"] = "jest"
        if not config.is_expo:
            scripts["rnlink"] = "npx react-native link"
        package_patchers = [lambda data: patches.update_scripts(data, scripts)]
        if config.prettier and config.is_ts:
            package_patchers.append(patches.set_prettier_config)
        _patch_json(toolbox, f"{folder}/package.json", *package_patchers)

        if config.prettier and not config.is_ts:
            fs.write_text(f"{folder}/.prettierrc.js", C.PRETTIER_RC)

        if not config.is_expo:
            output = toolbox.runner.run(run_script_command("rnlink", yarn), cwd=fs.path(folder))
            print_process_output(toolbox.console, output)

    print_success(toolbox.console, name)
    run = "yarn" if yarn else "npm run"
    if config.is_expo:
        print_instructions(toolbox.console, [f"cd {name}", f"{_package_manager(yarn)} start"])
    else:
        print_instructions(
            toolbox.console,
            [
                "iOS:",
                f"• cd {name}/ios",
                "• pod install",
                "• cd ..",
                f"• {run} ios",
                "",
                "Android:",
                "• Have an Android emulator running",
                f"• {run} android",
            ],
        )
        print_warning(toolbox.console, C.VECTOR_ICONS_WARNING)
    toolbox.console.print()


INTEGRATORS: dict[Framework, Callable[..., None]] = {
    Framework.angular: add_pxblue_angular,
    Framework.react: add_pxblue_react,
    Framework.ionic: add_pxblue_ionic,
    Framework.react_native: add_pxblue_react_native,
}


def integrate(config: ProjectConfig, toolbox: Toolbox) -> None:
    """Run the integrator matching the config's framework."""
    INTEGRATORS[config.framework](config, toolbox)
