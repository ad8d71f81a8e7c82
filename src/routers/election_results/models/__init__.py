from .election_models import ElectionResult, AssemblyPaper, PartyPositionAC, PartyPositionPE

__all__ = [
    "ElectionResult",
    "AssemblyPaper",
    "PartyPositionAC",
    "PartyPositionPE",
]
