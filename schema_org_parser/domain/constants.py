"""Markup selectors and site locations.

Centralizes the structural conventions of schema.org pages that the parsers
depend on, so a layout change only needs updating here.
"""

# ── Site Locations ──────────────────────────────────────────────────────

DEFAULT_BASE_URL = 'https://schema.org'

# Full hierarchy of all terms, relative to the base URL
INDEX_PATH = '/docs/full.html'

# ── Term Index ──────────────────────────────────────────────────────────

# Links to every term inside the type tree container
TERM_LINK_HREFS_XPATH = "//div[@id='thing_tree']//li//a/@href"

# ── Term Definition Page ────────────────────────────────────────────────

DEFINITION_ROWS_XPATH = "//table[@class='definition-table']/tbody/tr"

# Relative to a definition row
PROPERTY_NAME_XPATH = 'th/code'
EXPECTED_TYPE_TEXT_XPATH = "td[@class='prop-ect']//text()"
