"""
Advisor engines - prompt assembly, text generation and orchestration
"""

from advisor_service.engines.advice_generator import AdviceGenerator
from advisor_service.engines.advisor_engine import AdvisorEngine

__all__ = ["AdviceGenerator", "AdvisorEngine"]
