"""Built-in prune rule tables.

These are the names, directories, and extensions pruned when no
replacement tables are configured. Mostly mirrors the set yarn's
autoclean removes.
"""

DEFAULT_FILES: tuple[str, ...] = (
    "Makefile",
    "Gulpfile.js",
    "Gruntfile.js",
    "gulpfile.js",
    ".DS_Store",
    ".tern-project",
    ".gitattributes",
    ".editorconfig",
    ".eslintrc",
    "eslint",
    ".eslintrc.js",
    ".eslintrc.json",
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
    ".npmignore",
    ".jshintrc",
    ".flowconfig",
    ".documentup.json",
    ".yarn-metadata.json",
    ".travis.yml",
    "appveyor.yml",
    ".gitlab-ci.yml",
    "circle.yml",
    ".coveralls.yml",
    "CHANGES",
    "LICENSE.txt",
    "LICENSE",
    "license",
    "AUTHORS",
    "CONTRIBUTORS",
    ".yarn-integrity",
    ".yarnclean",
    "_config.yml",
    ".babelrc",
    ".yo-rc.json",
    "jest.config.js",
    "karma.conf.js",
    ".appveyor.yml",
    "tsconfig.json",
)

DEFAULT_DIRECTORIES: tuple[str, ...] = (
    "__tests__",
    "test",
    "tests",
    "powered-test",
    "docs",
    "doc",
    ".idea",
    ".vscode",
    "website",
    "images",
    "assets",
    "example",
    "examples",
    "coverage",
    ".nyc_output",
    ".circleci",
    ".github",
)

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    ".markdown",
    ".md",
    ".ts",
    ".jst",
    ".coffee",
    ".tgz",
    ".swp",
)
