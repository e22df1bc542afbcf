# ABOUTME: Domain layer: poster records, their serialization and the scrape pipeline
# ABOUTME: Only the data model is re-exported here

from .models import AlertType, Complexion, MissingPersonPoster, PhysicalBuild, Sex, State

# Import the pipeline on demand to avoid circular imports
# Use: from rastreadora.core.pipeline import ScrapePipeline

__all__ = [
    "AlertType",
    "Complexion",
    "MissingPersonPoster",
    "PhysicalBuild",
    "Sex",
    "State",
]
