# src/docblocks/observability/names.py

"""Standard metric names for docblocks observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Docblock Parsing Metrics
# ============================================================================

# Duration
DOCBLOCK_PARSE_DURATION = "docblock_parse_duration"

# Counters
DOCBLOCK_PARSE_REQUESTS_TOTAL = "docblock_parse_requests_total"
DOCBLOCK_PARSE_ERRORS_TOTAL = "docblock_parse_errors_total"

# Counters (labelled by section kind)
DOCBLOCK_SECTIONS_TOTAL = "docblock_sections_total"
