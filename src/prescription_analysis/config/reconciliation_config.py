# ============================================================================
# src/prescription_analysis/config/reconciliation_config.py
# ============================================================================
"""
Reconciliation Settings
- Stock defaults for newly created medicines
- Restock quantity for medicines already on file
- Disease profile placeholders
- Schedule anchor time
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class ReconciliationSettings(BaseSettings):
    RESTOCK_QUANTITY: int = Field(
        default=30,
        ge=0,
        description="Units added to an existing medicine's stock when the same medicine is prescribed again"
    )
    DEFAULT_STOCK_COUNT: int = Field(
        default=30,
        ge=0,
        description="Initial stock count for a newly created medicine"
    )
    DEFAULT_REFILL_THRESHOLD: int = Field(
        default=7,
        ge=0,
        description="Refill reminder threshold for a newly created medicine"
    )
    DEFAULT_PATIENT_AGE: int = Field(
        default=30,
        ge=0, le=130,
        description="Age placed in a new disease profile when the caller does not supply one"
    )
    SCHEDULE_ANCHOR_HOUR: int = Field(
        default=8,
        ge=0, le=23,
        description="Hour of the first dose when dose times are derived from a times-per-day count"
    )


reconciliation_settings = ReconciliationSettings()
