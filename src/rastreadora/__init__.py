# ABOUTME: rastreadora - missing person poster scraper for Mexican state prosecutors' sites
# ABOUTME: Fetches listing pages concurrently and extracts structured poster records

__version__ = "0.6.0"
