"""
gesturepoker Agents - seat controllers

This module provides the base agent interface and the heuristic bot that
plays the non-human seats.
"""

from gesturepoker.agents.base import BaseAgent
from gesturepoker.agents.heuristic_agent import HeuristicAgent, decide_action

__all__ = ["BaseAgent", "HeuristicAgent", "decide_action"]
