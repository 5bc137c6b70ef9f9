"""
Extraction module for searching and enriching places.

- search.py: Nearby search via the provider
- enrichment.py: Per-place phone lookups and Place assembly
- session.py: Search session state machine and controller
"""

from .search import PlaceSearchClient, SearchResult
from .enrichment import PlaceDetailClient, ResultAggregator
from .session import (
    SearchSession,
    SearchSessionController,
    LocationResolved,
    SearchStarted,
    SearchCompleted,
    transition,
)
