from __future__ import annotations

# Rendered in mismatch messages wherever a value is absent.
ABSENT_VALUE_TEXT = "null"

# Structured mismatch codes.
ERROR_CODE_FIELD_MISMATCH = "FIELD_MISMATCH"
ERROR_CODE_PATH_NOT_RELATIVE = "PATH_NOT_RELATIVE"

# Expected-issue document formats, keyed by file suffix.
YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)

VERBOSE_ENV_VAR = "ISSUECHECK_VERBOSE"

EXIT_SUCCESS = 0
EXIT_MISMATCH = 1
EXIT_INTERNAL_ERROR = 2
