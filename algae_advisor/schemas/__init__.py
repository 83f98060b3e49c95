"""
Pydantic schemas for API request and response validation.

All endpoints use explicit Pydantic models; the Gemini wire payloads are
described separately in algae_advisor.agents.cultivation.types.
"""
