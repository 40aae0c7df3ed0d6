from models.rounding import RoundingPolicy
from models.room import RoomInput, RoomResult
from models.project import AuxiliaryMaterials, ProjectResult, ProjectTotals
