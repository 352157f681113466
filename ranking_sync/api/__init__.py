from .routes import router, RANKING_PATH

__all__ = ["router", "RANKING_PATH"]
