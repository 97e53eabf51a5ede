"""Common literal values used across doxywiki.

These constants keep output filenames, the summary placeholder and the naming
limits centralized so the generator, templates and tests import the same
values without drifting.

Examples
--------
>>> from doxywiki import _constants
>>> _constants.SUMMARY_PLACEHOLDER
'{{doxygen}}'
>>> _constants.ENCODED_CHARACTERS[":"]
'%3A'
"""

MANIFEST_FILENAME = "manifest.json"
SUMMARY_PLACEHOLDER = "{{doxygen}}"
TEMPLATE_SUFFIX = ".jinja"
JSON_INDENT = 2
MAX_NAME_LENGTH = 200
SAFE_PUNCTUATION = frozenset("_.+-")
ENCODED_CHARACTERS = {
    ":": "%3A",
    "<": "%3C",
    ">": "%3E",
    "*": "%2A",
    "?": "%3F",
    "|": "%7C",
    '"': "%22",
}
