"""Common literal values used across simple_ssg.

These constants keep file names, extensions, and template markers centralized
so the walker, renderer, templates, and tests can import the same values
without drifting. Intended for internal use within the simple_ssg package.

Examples
--------
>>> from simple_ssg import _constants
>>> _constants.MARKUP_EXTENSIONS[".dj"]
'djot'
>>> _constants.TOC_MARKER in "<nav><!-- {TABLE_OF_CONTENTS} --></nav>"
True
"""

DJOT = "djot"
MARKDOWN = "markdown"

RENDERED_EXTENSION = ".html"
MARKUP_EXTENSIONS = {
    ".dj": DJOT,
    ".djot": DJOT,
    ".md": MARKDOWN,
}
INDEX_FILENAMES = tuple(f"index{suffix}" for suffix in MARKUP_EXTENSIONS)

TEMPLATE_FILENAME = "template.html"
CONTENT_MARKER = "<!-- {CONTENT} -->"
TOC_MARKER = "<!-- {TABLE_OF_CONTENTS} -->"
PYGMENTS_CSS_MARKER = "/* {PYGMENTS_CSS} */"

DEFAULT_CONFIG_FILENAME = "simple-ssg.yaml"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_PYGMENTS_STYLE = "monokai"
