# ============================================================================
# src/prescription_analysis/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .analysis_config import AnalysisSettings, analysis_settings
from .reconciliation_config import ReconciliationSettings, reconciliation_settings
from .logging_config import LoggingSettings, logging_settings

__all__ = [
    'AnalysisSettings',
    'analysis_settings',
    'ReconciliationSettings',
    'reconciliation_settings',
    'LoggingSettings',
    'logging_settings',
]
