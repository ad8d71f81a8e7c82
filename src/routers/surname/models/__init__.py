from .surname_models import Assembly, SurnameCount

__all__ = ["Assembly", "SurnameCount"]
