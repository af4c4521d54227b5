from models.weather import FlightCategory, FlightCategoryResult
from typing import Optional
from .extractors import extract_ceiling, extract_visibility


def categorize(ceiling_ft: Optional[int], visibility_sm: Optional[float]) -> FlightCategory:
    """FAA flight category from ceiling and visibility.

    Rules run worst-first and either reading alone can push the category
    down. A missing reading never qualifies. The MVFR bounds are inclusive,
    so exactly 3000 ft or 5 SM is MVFR rather than VFR.
    """
    has_ceiling = ceiling_ft is not None
    has_vis = visibility_sm is not None

    if (has_ceiling and ceiling_ft < 500) or (has_vis and visibility_sm < 1):
        return FlightCategory.LIFR
    if (has_ceiling and ceiling_ft < 1000) or (has_vis and visibility_sm < 3):
        return FlightCategory.IFR
    if (has_ceiling and ceiling_ft <= 3000) or (has_vis and visibility_sm <= 5):
        return FlightCategory.MVFR
    return FlightCategory.VFR


def classify(report: str) -> FlightCategoryResult:
    """Flight category for a raw METAR, with the readings it was derived from."""
    visibility = extract_visibility(report)
    ceiling = extract_ceiling(report)
    return FlightCategoryResult(
        category=categorize(ceiling, visibility),
        visibility_sm=visibility,
        ceiling_ft=ceiling,
    )
