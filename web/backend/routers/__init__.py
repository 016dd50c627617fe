"""API route handlers."""

from .matching import router as matching_router
from .recommendations import router as recommendations_router
