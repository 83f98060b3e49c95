"""
AI Components for the Algae Biofuel Advisor.

1. Cultivation Advisor (Single-Shot Multimodal Workflow)
   - Sends the cultivation parameters, and optionally an algae image, to
     Gemini's generateContent REST method
   - NOT an agent framework - one prompt, one response
   - Located in: algae_advisor/agents/cultivation/

The markdown answer is split into sections by
algae_advisor/services/response_presenter.py.
"""

from algae_advisor.agents.cultivation import (
    build_cultivation_prompt,
    obtain_recommendations,
)

__all__ = [
    "obtain_recommendations",
    "build_cultivation_prompt",
]
