"""Constants shared across depsort."""

# Separator between key, dependency and extension in a base name:
#   Foo.js      -> key "Foo", no dependency
#   Bar.Foo.js  -> key "Bar", depends on "Foo"
NAME_SEPARATOR = "."

# A base name with exactly this many parts declares no dependency.
PARTS_WITHOUT_DEPENDENCY = 2

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "console"
DEFAULT_ENCODING = "utf-8"
DEFAULT_SEPARATOR = "\n"

ENV_PREFIX = "DEPSORT_"
