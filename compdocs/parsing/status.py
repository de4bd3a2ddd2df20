"""Governance status derived from maturity metadata."""

from __future__ import annotations

from typing import Dict, Optional

from ..models import ComponentStatus, MaturityCategory, MaturityLevel

CAUTION_RECOMMENDATION = "Use with caution - this component may have known issues or limitations"
UNKNOWN_RECOMMENDATION = "Status unknown - verify maturity level before use"

LEVEL_STATUS: Dict[MaturityLevel, ComponentStatus] = {
    MaturityLevel.BEST_PRACTICE: ComponentStatus.RECOMMENDED,
    MaturityLevel.DEPLOYED: ComponentStatus.STABLE,
    MaturityLevel.CANDIDATE: ComponentStatus.EXPERIMENTAL,
    MaturityLevel.AVAILABLE: ComponentStatus.AVAILABLE_WITH_ISSUES,
    MaturityLevel.DEPRECATED: ComponentStatus.DEPRECATED,
}

LEVEL_RECOMMENDATIONS: Dict[MaturityLevel, str] = {
    MaturityLevel.BEST_PRACTICE: (
        "Recommended for production use - follows VA design system best practices"
    ),
    MaturityLevel.DEPLOYED: "Stable and safe to use in production applications",
    MaturityLevel.CANDIDATE: "Experimental - suitable for testing but may change before release",
    MaturityLevel.AVAILABLE: "Available but may have issues - review carefully before use",
    MaturityLevel.DEPRECATED: (
        "Deprecated - do not use, component will be removed in future versions"
    ),
}


def _is_caution(maturity_category: Optional[str]) -> bool:
    return (maturity_category or "").strip().lower() == MaturityCategory.CAUTION.value


def determine_component_status(
    maturity_category: Optional[str], maturity_level: Optional[str]
) -> ComponentStatus:
    """A ``caution`` category overrides whatever the maturity level says."""
    if _is_caution(maturity_category):
        return ComponentStatus.USE_WITH_CAUTION
    return LEVEL_STATUS.get(MaturityLevel.coerce(maturity_level), ComponentStatus.UNKNOWN)


def get_recommendation(maturity_category: Optional[str], maturity_level: Optional[str]) -> str:
    if _is_caution(maturity_category):
        return CAUTION_RECOMMENDATION
    return LEVEL_RECOMMENDATIONS.get(MaturityLevel.coerce(maturity_level), UNKNOWN_RECOMMENDATION)


__all__ = ["determine_component_status", "get_recommendation"]
