"""
Simulator API Routes

Exposes the admission fit simulator via REST API.
Student identity comes from the path; access control is handled upstream.
The SQL reader blocks, so handlers are sync: FastAPI runs each in its
threadpool and the engine coroutine gets its own loop there.
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from db import get_db
from .logic.adapter import SqlRecordReader
from .logic.contracts import (
    HypotheticalGrade,
    SimulationInput,
    SimulationResult,
    TargetSimulationResult,
    ScenarioComparison,
    ImprovementPlan,
)
from .logic.constants import FitTier, ENGINE_VERSION
from .logic.engine import AdmissionSimulator
from .logic.errors import SchoolNotFoundError, StudentNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulator", tags=["simulator"])


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class SimulationRequest(BaseModel):
    """Request body for the run endpoint."""
    school_id: str = Field(..., description="Target school id")
    hypothetical_grades: Optional[List[HypotheticalGrade]] = Field(
        default=None,
        description="What-if rank per subject (clamped to 1-9)",
        examples=[[{"subject": "Math", "rank": 2}, {"subject": "English", "rank": 3}]],
    )
    hypothetical_activities: Optional[int] = Field(
        default=None,
        ge=0,
        description="What-if number of approved activities",
    )
    hypothetical_volunteer_hours: Optional[float] = Field(
        default=None,
        ge=0.0,
        description="What-if total volunteer hours",
    )

    def to_simulation_input(self) -> SimulationInput:
        return SimulationInput(
            hypothetical_grades=self.hypothetical_grades,
            hypothetical_activities=self.hypothetical_activities,
            hypothetical_volunteer_hours=self.hypothetical_volunteer_hours,
        )


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_simulator(db: Session = Depends(get_db)) -> AdmissionSimulator:
    reader = SqlRecordReader(db)
    return AdmissionSimulator(records=reader, schools=reader, targets=reader)


def _not_found(exc: LookupError) -> HTTPException:
    if isinstance(exc, SchoolNotFoundError):
        return HTTPException(status_code=404, detail="School not found")
    return HTTPException(status_code=404, detail="Student not found")


def _server_error(exc: Exception) -> JSONResponse:
    logger.exception(f"❌ Simulator request failed: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post(
    "/students/{student_id}/run",
    response_model=SimulationResult,
    summary="Run a what-if simulation",
)
def run_simulation(
    student_id: str,
    request: SimulationRequest,
    simulator: AdmissionSimulator = Depends(get_simulator),
):
    """
    Simulate hypothetical grades, activity count and volunteer hours
    against one school.

    **Request Body:**
    - `school_id`: Target school
    - `hypothetical_grades`: Optional list of `{subject, rank}`
    - `hypothetical_activities`: Optional activity count
    - `hypothetical_volunteer_hours`: Optional volunteer hours

    Omitted fields keep the student's real values.
    """
    try:
        return asyncio.run(simulator.run_simulation(
            student_id, request.school_id, request.to_simulation_input()
        ))
    except (SchoolNotFoundError, StudentNotFoundError) as e:
        raise _not_found(e)
    except Exception as e:
        return _server_error(e)


@router.get(
    "/students/{student_id}/compare/{school_id}",
    response_model=ScenarioComparison,
    summary="Compare canned improvement scenarios",
)
def compare_scenarios(
    student_id: str,
    school_id: str,
    simulator: AdmissionSimulator = Depends(get_simulator),
):
    """
    Baseline plus four scenarios in fixed order: grades up one rank,
    three more activities, twenty more volunteer hours, all combined.
    """
    try:
        return asyncio.run(simulator.compare_scenarios(student_id, school_id))
    except (SchoolNotFoundError, StudentNotFoundError) as e:
        raise _not_found(e)
    except Exception as e:
        return _server_error(e)


@router.get(
    "/students/{student_id}/improvement/{school_id}",
    response_model=ImprovementPlan,
    summary="Improvement plan toward a target tier",
)
def get_improvement_plan(
    student_id: str,
    school_id: str,
    target_tier: FitTier = Query(default=FitTier.FIT),
    simulator: AdmissionSimulator = Depends(get_simulator),
):
    try:
        return asyncio.run(simulator.get_improvement_plan(student_id, school_id, target_tier))
    except (SchoolNotFoundError, StudentNotFoundError) as e:
        raise _not_found(e)
    except Exception as e:
        return _server_error(e)


@router.get(
    "/students/{student_id}/targets",
    response_model=List[TargetSimulationResult],
    summary="Simulate every target school",
)
def simulate_all_targets(
    student_id: str,
    simulator: AdmissionSimulator = Depends(get_simulator),
):
    """Baseline simulation for each target school, ordered by priority."""
    try:
        return asyncio.run(simulator.simulate_all_targets(student_id))
    except (SchoolNotFoundError, StudentNotFoundError) as e:
        raise _not_found(e)
    except Exception as e:
        return _server_error(e)


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Simulator health check")
def health_check():
    """Check if the simulator is operational."""
    return {"status": "ok", "engine": "admission_simulator", "version": ENGINE_VERSION}
