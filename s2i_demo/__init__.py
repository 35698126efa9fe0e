"""S2I demo HTTP service: landing page, health, readiness and info endpoints."""

__version__ = "1.0.0"
