from fastapi import APIRouter, Depends, HTTPException, Request, status

from schemas.validation import (
    AUTO_DETECT,
    JobStatus,
    LanguageInfo,
    LanguageSuggestion,
    SubmitResponse,
    ValidationRequest,
)
from validators.job import ValidationJob
from validators.selector import suggest_language, supported_languages

router = APIRouter()


def get_validation_job(request: Request) -> ValidationJob:
    return request.app.state.validation_job


@router.post("/", response_model=SubmitResponse, status_code=status.HTTP_202_ACCEPTED)
def submit_validation(
    validation_request: ValidationRequest,
    job: ValidationJob = Depends(get_validation_job),
) -> SubmitResponse:
    accepted = job.submit(validation_request.file_path, validation_request.language)
    if not accepted:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Validation already in progress",
        )
    return SubmitResponse(accepted=True, status="running")


@router.get("/status", response_model=JobStatus)
def get_status(request: Request, job: ValidationJob = Depends(get_validation_job)) -> JobStatus:
    in_progress, outcome = job.snapshot()
    if outcome is not None:
        # keep the result on screen for later reads
        request.app.state.last_outcome = outcome
        return JobStatus(status="completed", outcome=outcome)
    if in_progress:
        return JobStatus(status="running")

    outcome = getattr(request.app.state, "last_outcome", None)

    if outcome is None:
        return JobStatus(status="idle")
    return JobStatus(status="completed", outcome=outcome)


@router.get("/languages", response_model=list[LanguageInfo])
async def list_languages() -> list[LanguageInfo]:
    languages = [LanguageInfo(name=AUTO_DETECT)]
    languages += [LanguageInfo(name=name, extension=ext) for name, ext in supported_languages()]
    return languages


@router.get("/languages/suggest", response_model=LanguageSuggestion)
async def suggest(file_path: str) -> LanguageSuggestion:
    return LanguageSuggestion(language=suggest_language(file_path))
