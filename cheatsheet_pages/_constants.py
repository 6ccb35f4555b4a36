"""Common literal values used across cheatsheet_pages.

These constants keep the input and output filenames centralized so the
compiler, page generator, index builder, and tests import the same values
without drifting. Intended for internal use within the cheatsheet_pages
package.

Examples
--------
>>> from cheatsheet_pages import _constants
>>> _constants.PAGE_FILENAME
'cheatsheet.html'
>>> "generated-demo".startswith(_constants.GENERATED_PREFIX)
True
"""

CONFIG_FILENAME = "config.json"
MARKDOWN_FILENAME = "index.md"
ASSETS_DIRNAME = "assets"

PAGE_FILENAME = "cheatsheet.html"
LAYOUT_FILENAME = "index.jinja"
LAYOUT_SUFFIX = ".jinja"
STYLESHEET_FILENAME = "style.css"
COMMON_STYLESHEET_FILENAME = "common.css"
TEMPLATE_MODULE_FILENAME = "template.py"

MAIN_TEMPLATE_AREA = "main"
PARTIALS_TEMPLATE_AREA = "partials"
RESERVED_TEMPLATE_AREAS = frozenset({MAIN_TEMPLATE_AREA, PARTIALS_TEMPLATE_AREA})

GENERATED_PREFIX = "generated-"
DEFAULT_MAX_GENERATED = 10
DEFAULT_PYGMENTS_STYLE = "monokai"
