from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

VEHICLE_COLORS = (
    "black", "blue", "brown", "green", "red", "silver", "white", "yellow", "unknown",
)
ORIENTATIONS = ("Front", "Rear", "Unknown")


class ApiModel(BaseModel):
    # Unknown fields sent by the service are kept, not dropped
    model_config = ConfigDict(extra="allow", populate_by_name=True, protected_namespaces=())


class DetectionBox(ApiModel):
    xmin: int
    ymin: int
    xmax: int
    ymax: int


class PlateCandidate(ApiModel):
    plate: str
    score: float


class RegionResult(ApiModel):
    code: str
    score: float


class VehicleResult(ApiModel):
    type: str
    score: float  # 0 when no vehicle is found
    box: DetectionBox


class ModelMakeResult(ApiModel):
    make: str
    model: str
    score: float


class ColorResult(ApiModel):
    color: str  # one of VEHICLE_COLORS, not enforced
    score: float


class OrientationResult(ApiModel):
    orientation: str  # one of ORIENTATIONS, not enforced
    score: float


class PlateDetection(ApiModel):
    box: DetectionBox
    plate: str
    score: float
    dscore: float
    # First element is the top prediction
    candidates: List[PlateCandidate] = Field(default_factory=list)
    region: Optional[RegionResult] = None
    vehicle: Optional[VehicleResult] = None
    model_make: Optional[List[ModelMakeResult]] = None
    color: Optional[List[ColorResult]] = None
    orientation: Optional[List[OrientationResult]] = None


class RecognitionResult(ApiModel):
    processing_time: float
    timestamp: str
    version: int
    camera_id: Optional[str] = None
    filename: str
    detections: List[PlateDetection] = Field(default_factory=list, alias="results")


class Usage(ApiModel):
    month: int
    year: int
    calls: int
    resets_on: str


class UsageStatistics(ApiModel):
    usage: Usage
    total_calls: int
