"""Core constants: structural limits and wire-format literals for template content.

Single source of truth for the limits enforced by the field validator and
the content engine, and for the placeholder delimiter convention.
"""

# Envelope version written by serialize_content; assumed when "version" is absent.
CONTENT_VERSION = 1

# Structural limits (reject on violation)
MAX_FIELDS_PER_TEMPLATE = 50
MAX_FIELD_NAME_LENGTH = 100
MAX_SELECT_OPTIONS = 50
MAX_OPTION_LENGTH = 100

# Placeholder token delimiters, e.g. "{{poste}}"
PLACEHOLDER_OPEN = "{{"
PLACEHOLDER_CLOSE = "}}"

# Well-known keys inside FieldDefinition.meta
META_PLACEHOLDER_RAW = "placeholderRaw"
META_BUSINESS_KEY = "businessKey"

# Slug arbitration: length of the random suffix used on a double collision
SLUG_TOKEN_LENGTH = 6

# Template column widths; a caller-supplied slug candidate is capped below the
# column so arbiter and retry suffixes ("-<millis>-<token>-<token>") still fit.
MAX_TITLE_LENGTH = 255
MAX_SLUG_LENGTH = 255
MAX_SLUG_CANDIDATE_LENGTH = 200
