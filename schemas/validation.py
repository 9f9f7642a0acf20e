from typing import Literal
from pydantic import BaseModel, ConfigDict, field_validator

OutcomeStatus = Literal[
    "success", "compile_error", "runtime_output", "selection_error", "system_error"
]

AUTO_DETECT = "auto"


class ValidationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_path: str = ""
    language: str = AUTO_DETECT

    @field_validator("language")
    @classmethod
    def normalize_auto_detect(cls, v: str) -> str:
        # "Auto-detect" is the label the desktop picker used
        return AUTO_DETECT if v == "Auto-detect" else v


class ValidationOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: OutcomeStatus
    message: str


class SubmitResponse(BaseModel):
    accepted: bool
    status: Literal["running"]


class JobStatus(BaseModel):
    status: Literal["idle", "running", "completed"]
    outcome: ValidationOutcome | None = None


class LanguageInfo(BaseModel):
    name: str
    extension: str | None = None


class LanguageSuggestion(BaseModel):
    language: str | None = None
