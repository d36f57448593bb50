"""
Weather Advisor Service - gRPC orchestrator for multi-city weather advisories
"""

__version__ = "1.0.0"
