"""Data tables for the PX Blue integration.

Package lists, package.json scripts, lint/prettier configs, and the
markup snippets patched into generated projects, keyed by framework.
"""

from __future__ import annotations

from pxblue_cli.models.project import Framework

PRETTIER_CONFIG_PACKAGE = "@pxblue/prettier-config"

MATERIAL_ICONS_LINK = (
    '<link href="https://fonts.googleapis.com/icon?family=Material+Icons" rel="stylesheet" />'
)

_ESLINT_TS: list[str] = [
    "@pxblue/eslint-config",
    "@typescript-eslint/eslint-plugin",
    "@typescript-eslint/parser",
    "eslint",
    "eslint-config-prettier",
]

LINT_DEPENDENCIES: dict[Framework, list[str]] = {
    Framework.angular: list(_ESLINT_TS),
    Framework.react: _ESLINT_TS + ["eslint-plugin-react"],
    Framework.ionic: list(_ESLINT_TS),
    Framework.react_native: _ESLINT_TS + ["eslint-plugin-react", "eslint-plugin-react-hooks"],
}

PRETTIER_DEPENDENCIES: dict[Framework, list[str]] = {
    framework: ["prettier", PRETTIER_CONFIG_PACKAGE] for framework in Framework
}

DEPENDENCIES: dict[Framework, list[str]] = {
    Framework.ionic: ["@pxblue/angular-themes", "@pxblue/colors", "@pxblue/icons"],
    Framework.react_native: [
        "@pxblue/react-native-components",
        "@pxblue/react-native-themes",
        "@pxblue/colors",
        "@pxblue/icons-svg",
        "react-native-paper",
        "react-native-safe-area-context",
        "react-native-svg",
        "react-native-vector-icons",
    ],
}

DEV_DEPENDENCIES: dict[Framework, list[str]] = {
    Framework.ionic: ["@pxblue/icons-svg"],
    Framework.react_native: ["react-native-svg-transformer"],
}

# Scripts added to every project of a framework.
SCRIPTS: dict[Framework, dict[str, str]] = {
    Framework.angular: {"start:ie11": "ng serve --configuration es5"},
    Framework.react: {},
    Framework.ionic: {"start": "ionic serve"},
    Framework.react_native: {},
}


def _lint_scripts(glob: str) -> dict[str, str]:
    return {"lint": f'eslint "{glob}"', "lint:fix": f'eslint "{glob}" --fix'}


def _prettier_scripts(glob: str) -> dict[str, str]:
    return {"prettier": f'prettier "{glob}" --write', "prettier:check": f'prettier "{glob}" --check'}


LINT_SCRIPTS: dict[Framework, dict[str, str]] = {
    Framework.angular: _lint_scripts("src/**/**.ts"),
    Framework.react: _lint_scripts("src/**/**.{tsx,ts}"),
    Framework.ionic: _lint_scripts("src/**/**.ts"),
    Framework.react_native: _lint_scripts("**/**.{tsx,ts}"),
}

PRETTIER_SCRIPTS: dict[Framework, dict[str, str]] = {
    Framework.angular: _prettier_scripts("src/**/**.{ts,js,json,css,scss,html}"),
    Framework.react: _prettier_scripts("src/**/**.{ts,tsx,js,jsx,json,css,scss,html}"),
    Framework.ionic: _prettier_scripts("src/**/**.{ts,js,json,css,scss,html}"),
    Framework.react_native: _prettier_scripts("**/**.{ts,tsx,js,jsx,json,css,scss,html}"),
}

LINT_CONFIG_TS = """module.exports = {
    root: true,
    parser: '@typescript-eslint/parser',
    extends: ['@pxblue/eslint-config/ts'],
    parserOptions: {
        project: './tsconfig.json',
    },
    env: {
        browser: true,
    },
};
"""

LINT_CONFIG_TSX = """module.exports = {
    root: true,
    parser: '@typescript-eslint/parser',
    extends: ['@pxblue/eslint-config/tsx'],
    parserOptions: {
        project: './tsconfig.json',
    },
    env: {
        browser: true,
    },
};
"""

PRETTIER_RC = "module.exports = require('@pxblue/prettier-config');\n"

PRETTIER_IGNORE = "ios/\nandroid\n"

ROOT_COMPONENT: dict[Framework, str] = {
    Framework.angular: '<body class="pxb-blue">',
    Framework.ionic: '<app-root class="pxb-blue"></app-root>',
}

ANGULAR_STYLES = """@import '~@pxblue/colors/palette.scss';

/* You can add global styles to this file, and also import other style files */
html,
body {
    height: 100%;
}
body {
    margin: 0;
    font-family: 'Open Sans', Roboto, 'Helvetica Neue', sans-serif;
}
"""

ANGULAR_THEME_STYLES: list[str] = [
    "src/styles.scss",
    "./node_modules/@pxblue/angular-themes/theme.scss",
    "./node_modules/@pxblue/angular-themes/open-sans.scss",
]

IONIC_THEME_STYLES: list[dict[str, str]] = [
    {"input": "src/theme/variables.scss"},
    {"input": "src/global.scss"},
    {"input": "./node_modules/@pxblue/angular-themes/theme.scss"},
    {"input": "./node_modules/@pxblue/angular-themes/open-sans.scss"},
]

TSCONFIG_ES5: dict = {
    "extends": "./tsconfig.app.json",
    "compilerOptions": {"target": "es5"},
}

BROWSERS_PRODUCTION: list[str] = [">0.2%", "not dead", "not op_mini all"]

BROWSERS_DEVELOPMENT: list[str] = [
    "last 1 chrome version",
    "last 1 firefox version",
    "last 1 safari version",
]

VECTOR_ICONS_GRADLE = 'apply from: "../../node_modules/react-native-vector-icons/fonts.gradle"'

EXPO_EXTRA_DEPENDENCIES: list[str] = ["@use-expo/font", "expo-app-loading"]

EXPO_EXTRA_DEV_DEPENDENCIES: list[str] = ["jest-expo"]

VECTOR_ICONS_WARNING = (
    "Before running your project on iOS, you may need to open xCode and remove the "
    'react-native-vector-icons fonts from the "Copy Bundle Resources" step in Build Phases '
    "(refer to https://github.com/oblador/react-native-vector-icons/issues/1074)."
)
