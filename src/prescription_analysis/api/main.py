# ============================================================================
# src/prescription_analysis/api/main.py
# ============================================================================
"""
FastAPI backend for the prescription analysis engine.

Endpoints:
- GET  /api/health     liveness
- POST /api/analyze    OCR result -> analysis result
- POST /api/reconcile  OCR result + existing records -> analysis and plan
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, HTTPException

from prescription_analysis.config import logging_settings
from prescription_analysis.core.pipeline import PrescriptionAnalysisPipeline
from prescription_analysis.reconciliation import DiseaseProfile, Medicine, ProfileReconciler
from prescription_analysis.utils.exceptions import PrescriptionAnalysisError
from prescription_analysis.utils.logging import setup_logging
from .models import AnalyzeRequest, ReconcileRequest

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging at startup."""
    setup_logging(logging_settings)
    logger.info("Prescription analysis API started")
    yield


app = FastAPI(
    title="Prescription Analysis API",
    description="Extracts medications and chronic diseases from prescription text",
    version="1.0.0",
    lifespan=lifespan,
)

pipeline = PrescriptionAnalysisPipeline()
reconciler = ProfileReconciler()


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/api/health")
async def health():
    """Health check for monitoring."""
    return {"status": "healthy"}


@app.post("/api/analyze")
async def analyze(request: AnalyzeRequest) -> Dict[str, Any]:
    """
    Analyze OCR text from one prescription.

    Raises:
        HTTPException 422: no usable text
    """
    try:
        result = pipeline.analyze({"text": request.text, "confidence": request.confidence})
    except PrescriptionAnalysisError as e:
        logger.info(f"Analysis rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return result.to_dict()


@app.post("/api/reconcile")
async def reconcile(request: ReconcileRequest) -> Dict[str, Any]:
    """
    Analyze OCR text and plan the writes against the user's records.

    Nothing is stored; the caller applies the returned plan.
    """
    try:
        result = pipeline.analyze({"text": request.text, "confidence": request.confidence})
    except PrescriptionAnalysisError as e:
        logger.info(f"Analysis rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    plan = reconciler.reconcile(
        diseases=result.detected_diseases,
        medications=result.parsed_medications,
        user_id=request.user_id,
        existing_profiles=[DiseaseProfile.from_dict(p.model_dump()) for p in request.existing_profiles],
        existing_medicines=[Medicine.from_dict(m.model_dump()) for m in request.existing_medicines],
        user_age=request.user_age,
    )

    return {"analysis": result.to_dict(), "plan": plan.to_dict()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
