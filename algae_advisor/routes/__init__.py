"""
FastAPI routers for the Algae Biofuel Advisor.

Each module defines a router for one tab or concern (page, form, settings,
recommendations, health). Routers stay thin: they parse the request, call
the service layer and return a response model. AdvisorError subclasses are
translated to HTTP responses by the handler registered in main.py.
"""
