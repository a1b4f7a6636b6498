"""Directory conventions and defaults shared across viewkit."""

# Content source id that means "no namespace prefix"
ROOT_SOURCE_ID = "_root_"

LAYOUTS_DIR = "layouts"
PARTIALS_DIR = "partials"
VIEWS_DIR = "views"

DEFAULT_EXTENSION = ".html"

# Name of the shared group holding every layout and partial
COMMON_GROUP_NAME = "_common_"

NAMESPACE_SEPARATOR = ":"
