from .ats import analyze_ats
from .indicators import analyze_indicators
from .pipeline import analyze_cv_content, stage_weights, weighted_total
from .pm_intelligence import analyze_pm_stage
from .recruiter_ux import analyze_recruiter_ux

__all__ = [
    "analyze_indicators",
    "analyze_ats",
    "analyze_recruiter_ux",
    "analyze_pm_stage",
    "analyze_cv_content",
    "stage_weights",
    "weighted_total",
]
