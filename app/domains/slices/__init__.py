from app.domains.slices.entities import SliceDefinition
from app.domains.slices.schemas import SliceCreate, SliceUpdate, SliceResponse, SliceValidationResponse
from app.domains.slices.services import SliceService
from app.domains.slices.validation import check_slice_data

__all__ = [
    "SliceDefinition",
    "SliceCreate", "SliceUpdate", "SliceResponse", "SliceValidationResponse",
    "SliceService", "check_slice_data"
]
