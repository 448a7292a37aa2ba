"""Global constants for cliparams.

Reserved command-line tokens, well-known tag names and ini defaults live
here so the parser, the ini codec and the renderers agree on them.
"""

# Reserved command-line tokens, handled before any declared flag
XML_FLAG: str = "--xml"
HELP_FLAGS: tuple = ("-h", "--help")
SAVE_INI_FLAG: str = "--ctk-save-ini"
LOAD_INI_FLAG: str = "--ctk-load-ini"

FLAG_MARKER: str = "-"
LONG_FLAG_PREFIX: str = "--"
SHORT_FLAG_PREFIX: str = "-"

# Section used for ini lines that appear before any [section] header
DEFAULT_SECTION: str = "Global"

# Tag names with meaning to the binder, the manifest and the synopsis
TAG_FLAG: str = "flag"
TAG_LONGFLAG: str = "longflag"
TAG_INDEX: str = "index"
TAG_DESCRIPTION: str = "description"
TAG_LABEL: str = "label"
TAG_CHANNEL: str = "channel"
TAG_ENUMERATION: str = "enumeration"

XML_DECLARATION: str = '<?xml version="1.0" encoding="utf-8"?>'
