from .config import DisplayConfig
from .models import DisplayState
from .service import DisplayService

__all__ = ["DisplayConfig", "DisplayState", "DisplayService"]
