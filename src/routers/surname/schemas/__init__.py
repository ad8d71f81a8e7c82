from .surname_schemas import SearchRequest, AssemblyOut, SurnameRowOut

__all__ = ["SearchRequest", "AssemblyOut", "SurnameRowOut"]
