from fastapi import APIRouter, HTTPException, Request, status

from resume_ats.core.rate_limit import rate_limit
from resume_ats.schemas.ats import (
    GeneralATSRequest,
    GeneralATSResponse,
    MatchATSRequest,
    MatchATSResponse,
)
from resume_ats.services.ats_service import EmptyDocumentError, run_general_ats, run_match_ats

router = APIRouter()


@router.post("/ats/general", response_model=GeneralATSResponse, summary="Score a resume on its own")
@rate_limit()
def ats_general(request: Request, payload: GeneralATSRequest):
    _ = request
    try:
        return run_general_ats(payload)
    except EmptyDocumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/ats/match", response_model=MatchATSResponse, summary="Score a resume against a job description")
@rate_limit()
def ats_match(request: Request, payload: MatchATSRequest):
    _ = request
    try:
        return run_match_ats(payload)
    except EmptyDocumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
