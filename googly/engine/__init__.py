"""Engine Layer - Multi-engine Crawl Orchestration

This module provides the core engine layer, implementing:
- SearchOrchestrator: concurrent fan-out of crawl sessions + join
- CrawlSession: single-engine pagination state machine
- EngineAdapter: per-engine search protocol description
- merge_results: round-robin interleave and dedup by link
- UserAgentGenerator: randomized browser identification per session
- Result / EngineOutcome / SearchResponse: standardized result formats
"""

from .adapter import EngineAdapter
from .merger import interleave, merge_results, unique_by_link
from .options import SearchOptions, Timerange, TIMERANGE_CHOICES, UNLIMITED_PAGES
from .orchestrator import SearchOrchestrator
from .result import EngineOutcome, EngineStatus, Result, SearchResponse
from .session import CrawlSession, CrawlState
from .user_agent import BrowserConfig, BrowserFamily, UserAgentGenerator, UserAgentPools

__all__ = [
    "SearchOrchestrator",
    "CrawlSession",
    "CrawlState",
    "EngineAdapter",
    "SearchOptions",
    "Timerange",
    "TIMERANGE_CHOICES",
    "UNLIMITED_PAGES",
    "Result",
    "EngineOutcome",
    "EngineStatus",
    "SearchResponse",
    "interleave",
    "merge_results",
    "unique_by_link",
    "BrowserConfig",
    "BrowserFamily",
    "UserAgentGenerator",
    "UserAgentPools",
]
