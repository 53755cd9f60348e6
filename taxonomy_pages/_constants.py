"""Common literal values used across taxonomy_pages.

These constants keep sentinel category keys, builtin path templates, and
synthetic source prefixes centralized so the indexer, paginator, and tests
import the same values without drifting.

Examples
--------
>>> from taxonomy_pages import _constants
>>> "news.world".split(_constants.CATEGORY_DELIMITER)
['news', 'world']
>>> _constants.DEFAULT_CATEGORY
'default'
"""

CATEGORY_DELIMITER = "."
DEFAULT_CATEGORY = "default"
DEFAULT_CATEGORY_PATH = "page"
ROOT_CATEGORY = "root"
ROOT_CATEGORY_PATH = ""

DEFAULT_SORT_FIELD = "date"
DEFAULT_PER_PAGE = 10
DEFAULT_LAYOUT = "default.category.html"
DEFAULT_FIRST_TEMPLATE = ":categoryPath/index.html"
DEFAULT_PATH_TEMPLATE = ":categoryPath/page/:num/index.html"

PERMALINK_SUFFIX = "/index.html"
SYNTHETIC_SOURCE_PREFIXES = ("category/", "metadata/")
