"""Core constants: pagination bounds and shared literal values.

Single source of truth for values shared by schemas, endpoints and use cases.
"""

# Activity log pagination (page is 1-indexed)
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Suffix appended to the title of a cloned task
CLONE_TITLE_SUFFIX = " (Copy)"

# Field name recorded on CURRENT_STATUS_CHANGED entries
CURRENT_STATUS_FIELD = "current_status_id"
