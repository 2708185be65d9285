from __future__ import annotations

SKILL_BUILDER_NAME = "skill-builder"
SKILL_BUILDER_VERSION = "0.1.0"

SKILL_JSON_FILENAME = "skill.json"
README_FILENAME = "README.md"
PACKAGE_JSON_FILENAME = "package.json"
REQUIREMENTS_FILENAME = "requirements.txt"
GITIGNORE_FILENAME = ".gitignore"
EXAMPLES_DIRNAME = "examples"

NODE_ENTRY_FILENAME = "index.js"
PYTHON_ENTRY_FILENAME = "main.py"
DEFAULT_ENTRY_FILENAME = NODE_ENTRY_FILENAME

ENTRY_FILE_MODE = 0o755

SKILL_NAME_PATTERN = r"[a-z0-9]+(-[a-z0-9]+)*"
COMMAND_NAME_PATTERN = r"[a-z]+(-[a-z]+)*"
VERSION_PATTERN = r"\d+\.\d+\.\d+"

LICENSE_CHOICES = ("MIT", "Apache-2.0", "GPL-3.0", "BSD-3-Clause")

REQUIRED_METADATA_FIELDS = (
    "name",
    "title",
    "description",
    "version",
    "author",
    "license",
    "runtime",
    "entry",
)

REQUIRED_README_SECTIONS = ("Install", "Usage", "Safety", "License")

DEFAULT_SAFETY_NOTES = (
    "- This skill does not modify files without confirmation\n"
    "- All outputs are generated to stdout\n"
    "- No network requests are made"
)

GITIGNORE_PATTERNS = (
    "node_modules/",
    "*.pyc",
    "__pycache__/",
    ".DS_Store",
    "*.log",
    ".env",
    "dist/",
)
