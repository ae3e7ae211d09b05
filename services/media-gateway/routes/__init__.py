from .chat import router as chat_router
from .health import router as health_router
from .runway import router as runway_router
from .transcription import router as transcription_router

__all__ = ["chat_router", "health_router", "runway_router", "transcription_router"]
