from .bjp_models import BjpResult

__all__ = ["BjpResult"]
