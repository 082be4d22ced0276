# ============================================================================
# src/prescription_analysis/config/analysis_config.py
# ============================================================================
"""
Analysis Settings
- OCR quality threshold
- Keyword-match context windows
- Precaution triggers
- Confidence level bands
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class AnalysisSettings(BaseSettings):
    LOW_OCR_CONFIDENCE_THRESHOLD: float = Field(
        default=0.5,
        ge=0.0, le=1.0,
        description="Below this OCR confidence, add an informational precaution asking for careful review"
    )
    CONTEXT_WINDOW_CHARS: int = Field(
        default=50,
        ge=0,
        description="Characters kept on each side of a matched disease term when collecting context snippets"
    )
    MAX_CONTEXT_SNIPPETS: int = Field(
        default=3,
        ge=1,
        description="Maximum context snippets collected per detected disease"
    )
    MULTIPLE_MEDICATIONS_WARNING_COUNT: int = Field(
        default=3,
        ge=1,
        description="More medications than this triggers the drug-interaction awareness warning"
    )
    HIGH_CONFIDENCE: float = Field(
        default=0.85,
        ge=0.0, le=1.0,
        description="Overall confidence at or above this is reported as 'high'"
    )
    MEDIUM_CONFIDENCE: float = Field(
        default=0.70,
        ge=0.0, le=1.0,
        description="Overall confidence at or above this is reported as 'medium'"
    )


analysis_settings = AnalysisSettings()
