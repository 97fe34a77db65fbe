PROJECT_NAME = "isuumo"
API_PREFIX = "/api"
VERSION = "0.1.0"

# Search paging bounds; their product stays well inside a 64-bit OFFSET
MAX_SEARCH_PAGE = 1_000_000_000
MAX_SEARCH_PER_PAGE = 10_000
