import enum


class RoomType(str, enum.Enum):
    BEDROOM = "bedroom"
    BATHROOM = "bathroom"
    KITCHEN = "kitchen"
    LIVING = "living"
    DINING = "dining"
    OFFICE = "office"
    STORAGE = "storage"
    UTILITY = "utility"


class Priority(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ArchitecturalStyle(str, enum.Enum):
    MODERN = "modern"
    TRADITIONAL = "traditional"
    CONTEMPORARY = "contemporary"
    MINIMALIST = "minimalist"
    INDUSTRIAL = "industrial"


class StructuralElementType(str, enum.Enum):
    WALL = "wall"
    BEAM = "beam"
    COLUMN = "column"
    SLAB = "slab"
    FOUNDATION = "foundation"
    ROOF = "roof"


class MaterialType(str, enum.Enum):
    CONCRETE = "concrete"
    STEEL = "steel"
    WOOD = "wood"
    MASONRY = "masonry"
    COMPOSITE = "composite"


class CodeCategory(str, enum.Enum):
    STRUCTURAL = "structural"
    FIRE = "fire"
    ACCESSIBILITY = "accessibility"
    ENERGY = "energy"
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"


class ComplianceStatus(str, enum.Enum):
    COMPLIANT = "compliant"
    NON_COMPLIANT = "non-compliant"
    PENDING_REVIEW = "pending-review"


class OptimizationObjective(str, enum.Enum):
    SPACE = "space"
    COST = "cost"
    SUSTAINABILITY = "sustainability"
    ACCESSIBILITY = "accessibility"


class LevelOfDetail(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CADArtifactType(str, enum.Enum):
    FLOOR_PLAN = "floor-plan"
    MODEL_3D = "3d-model"
