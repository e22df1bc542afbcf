# ABOUTME: Data extraction from state prosecutors' websites
# ABOUTME: Page retrieval, per-site extractors and the registry that selects them

"""
Extraction Layer: Get posters out of listing pages

This layer handles:
- Page retrieval over HTTP and failure containment per page
- Per-site extraction of poster entries, with failures recorded per entry
- Optional per-entry enrichment from detail pages

Data Flow: Listing URL → Document → Posters + entry errors → Core pipeline
"""
