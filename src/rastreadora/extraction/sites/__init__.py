# ABOUTME: Per-source extractors, URL builders and field parsers
# ABOUTME: One module per state prosecutor's office, registered in rastreadora.extraction.registry
