"""Default removal rules for installed package trees.

This module defines the directory names, file names and file extensions
that are considered safe to remove from a ``node_modules`` tree. The
tables are part of the public API: callers may inspect them and pass
their own lists to ``PrunerOptions`` to replace any of them.
"""

from prunemod.core.manifest import DEPENDENCY_DIRECTORY, PACKAGE_MANIFEST

__all__ = [
    "DEFAULT_DIRECTORIES",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_FILES",
    "DEPENDENCY_DIRECTORY",
    "EXPERIMENTAL_DEFAULT_FILES",
    "PACKAGE_MANIFEST",
]

# Directory basenames removed as a whole.
DEFAULT_DIRECTORIES: list[str] = [
    # Tests
    "__tests__",
    "test",
    "tests",
    "powered-test",
    # Documentation and examples
    "docs",
    "doc",
    "website",
    "example",
    "examples",
    # Coverage output
    "coverage",
    ".nyc_output",
    # Editor settings
    ".idea",
    ".vscode",
    # CI configuration
    ".circleci",
    ".github",
]

# File basenames removed wherever they appear.
DEFAULT_FILES: list[str] = [
    # Build tools
    "Makefile",
    "Gulpfile.js",
    "Gruntfile.js",
    "gulpfile.js",
    # OS and editor noise
    ".DS_Store",
    ".tern-project",
    ".gitattributes",
    ".editorconfig",
    # Linters
    ".eslintrc",
    "eslint",
    ".eslintrc.js",
    ".eslintrc.json",
    ".eslintrc.yml",
    ".eslintignore",
    ".stylelintrc",
    "stylelint.config.js",
    ".stylelintrc.json",
    ".stylelintrc.yaml",
    ".stylelintrc.yml",
    ".stylelintrc.js",
    ".htmllintrc",
    "htmllint.js",
    ".lint",
    ".jshintrc",
    ".flowconfig",
    "tslint.json",
    # Formatters
    ".prettierrc",
    ".prettierrc.yml",
    ".prettierrc.toml",
    ".prettierrc.js",
    ".prettierrc.json",
    "prettier.config.js",
    # Package manager leftovers
    ".npmrc",
    ".npmignore",
    ".documentup.json",
    ".yarn-metadata.json",
    ".yarn-integrity",
    ".yarnclean",
    # CI
    ".travis.yml",
    "appveyor.yml",
    ".appveyor.yml",
    ".gitlab-ci.yml",
    "circle.yml",
    ".coveralls.yml",
    # Changelogs, licenses, authors
    "CHANGES",
    "changelog",
    "LICENSE.txt",
    "LICENSE",
    "LICENSE-MIT",
    "LICENSE.BSD",
    "license",
    "LICENCE.txt",
    "LICENCE",
    "LICENCE-MIT",
    "LICENCE.BSD",
    "licence",
    "AUTHORS",
    "CONTRIBUTORS",
    "README",
    # Tool configuration
    "_config.yml",
    ".babelrc",
    ".yo-rc.json",
    "jest.config.js",
    "karma.conf.js",
    "wallaby.js",
    "wallaby.conf.js",
    "tsconfig.json",
]

# File extensions removed wherever they appear.
DEFAULT_EXTENSIONS: list[str] = [
    ".markdown",
    ".md",
    ".mkd",
    ".ts",
    ".jst",
    ".coffee",
    ".tgz",
    ".swp",
]

# Additional file basenames used when experimental default files are
# enabled and the caller did not override the file list.
EXPERIMENTAL_DEFAULT_FILES: list[str] = [
    # Bundler and framework build configuration
    "webpack.config.js",
    "rollup.config.js",
    "rollup.config.mjs",
    "vite.config.js",
    "vite.config.ts",
    "esbuild.config.js",
    "babel.config.js",
    "babel.config.json",
    ".babelrc.js",
    ".babelrc.json",
    "next.config.js",
    "nuxt.config.js",
    "svelte.config.js",
    "vitest.config.js",
    "vitest.config.ts",
    "jest.config.json",
    "jest.config.ts",
    "karma.conf.ts",
    ".mocharc",
    ".mocharc.js",
    ".mocharc.json",
    ".mocharc.yml",
    "nodemon.json",
    "tsconfig.build.json",
    "tsconfig.base.json",
    # Environment examples
    ".env.example",
    ".env.sample",
    ".env.template",
    # CI, docs and community files
    ".gitlab-ci.yaml",
    "azure-pipelines.yml",
    "Jenkinsfile",
    "CODEOWNERS",
    "CODE_OF_CONDUCT",
    "CONTRIBUTING",
    "SECURITY",
    "HISTORY",
    "FUNDING.yml",
    ".release-it.json",
    ".versionrc",
    ".commitlintrc",
    ".commitlintrc.json",
    ".czrc",
    ".huskyrc",
    ".lintstagedrc",
    "Dockerfile",
    ".dockerignore",
]
