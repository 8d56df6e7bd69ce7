# ABOUTME: Pipeline orchestration layer
# ABOUTME: Transient cache, load context, finalizer, publishing store and the retrying loader

"""
Core Layer: pipeline orchestration and publishing

This layer handles:
- The per-attempt load context and transient opponent cache
- Finalizing located opponents into destination catalogues
- Bounded retries around the whole load
- Atomic publishing of loaded data to readers

Data Flow: host/ tables → parsers/ → finalizer → GameDataStore
"""

from .cache import OpponentCacheEntry, PipelineCache
from .context import LoadContext
from .store import GameDataStore, get_store

# Import the loader from triad_ingest.core.pipeline, it pulls in every parser stage

__all__ = [
    "GameDataStore",
    "LoadContext",
    "OpponentCacheEntry",
    "PipelineCache",
    "get_store",
]
