from typing import Dict, List, Optional, Sequence, Union

from platerecognizer.domain.requests import RecognitionRequest

# =========================
# DOMAIN LOGIC (Pure Python)
# =========================

PLATE_READER_PATH = "/plate-reader"
STATISTICS_PATH = "/statistics"


def combine_urls(base_url: str, relative_url: str) -> str:
    """
    Joins base and relative with exactly one '/'.
    An empty relative part returns base_url untouched.
    """
    if not relative_url:
        return base_url
    return base_url.rstrip("/") + "/" + relative_url.lstrip("/")


def resolve_regions(
    regions: Optional[Sequence[str]],
    default_regions: Optional[Sequence[str]],
) -> List[str]:
    # Only an absent value falls back; an explicit empty list disables the filter
    if regions is None:
        regions = default_regions
    if regions is None:
        return []
    return list(regions)


def build_form_data(
    request: RecognitionRequest,
    default_regions: Optional[Sequence[str]] = None,
) -> Dict[str, Union[str, List[str]]]:
    """
    Non-file multipart fields for a plate-reader call.
    Fields the service should not see are left out rather than sent empty.
    """
    data: Dict[str, Union[str, List[str]]] = {}

    if request.mmc:
        data["mmc"] = "true"

    regions = resolve_regions(request.regions, default_regions)
    if regions:
        data["regions"] = regions

    if request.camera_id:
        data["camera_id"] = request.camera_id

    return data
