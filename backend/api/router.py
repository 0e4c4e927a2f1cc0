import logging

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.errors import AnalysisRequestError
from config import settings
from models.requests import QuickAnalyzeRequest
from models.responses import AnalysisResult, AnalyzeResponse, ErrorResponse
from services import document_parser, resume_analyzer
from services.report import REPORT_FILENAME, build_report

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _run_analysis(resume_text: str, job_description: str) -> AnalyzeResponse:
    try:
        result = resume_analyzer.analyze(resume_text, job_description)
    except Exception:
        logger.exception("Analysis error")
        raise AnalysisRequestError(
            500, "Failed to analyze resume.", "Unexpected error during analysis"
        )
    return AnalyzeResponse(result=result)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/api/analyze", response_model=AnalyzeResponse, responses=ERROR_RESPONSES)
@limiter.limit(lambda: settings.rate_limit)
async def analyze(
    request: Request,
    resume_text: str | None = Form(None, alias="resumeText"),
    job_description: str | None = Form(None, alias="jobDescription"),
    file: UploadFile | None = File(None),
):
    if not resume_text and file is None:
        raise AnalysisRequestError(
            400,
            "Please provide either resume text or upload a file.",
            "No resume content provided",
        )

    final_resume_text = resume_text or ""
    if file is not None:
        content = await file.read()
        max_bytes = settings.max_upload_size_mb * 1024 * 1024
        if len(content) > max_bytes:
            raise AnalysisRequestError(
                400,
                f"File too large. Max size: {settings.max_upload_size_mb}MB",
                "Uploaded file exceeds the size limit",
            )
        logger.info("Processing file %s with media type %s", file.filename, file.content_type)
        extracted = document_parser.extract_text(content, file.content_type, file.filename)
        if extracted:
            final_resume_text = extracted

    if not final_resume_text.strip():
        raise AnalysisRequestError(
            400,
            "No valid resume content found.",
            "Could not extract text from file or empty resume text",
        )

    if not job_description or not job_description.strip():
        raise AnalysisRequestError(
            400, "Job description is required.", "No job description provided"
        )

    if len(final_resume_text) > settings.max_resume_chars:
        raise AnalysisRequestError(
            400,
            f"Resume too long (max {settings.max_resume_chars} chars)",
            "Resume text exceeds the length limit",
        )
    if len(job_description) > settings.max_job_description_chars:
        raise AnalysisRequestError(
            400,
            f"Job description too long (max {settings.max_job_description_chars} chars)",
            "Job description exceeds the length limit",
        )

    return _run_analysis(final_resume_text, job_description)


@router.post("/api/analyze/quick", response_model=AnalyzeResponse, responses=ERROR_RESPONSES)
@limiter.limit(lambda: settings.rate_limit)
async def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return _run_analysis(body.resume_text, body.job_description)


@router.post("/api/report", response_class=PlainTextResponse)
async def report(result: AnalysisResult):
    return PlainTextResponse(
        build_report(result),
        headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
    )
