# Import standard and third-party libraries
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional
import logging

from fastapi import FastAPI, File, UploadFile, HTTPException
from fastapi.middleware.cors import CORSMiddleware

import config
from models import AnalysisRequest, AnalysisResult, ErrorResponse
from resume_scorer import ResumeScorer
from utils.file_parser import extract_text

# Configure logging for the application
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Global scorer instance
scorer: Optional[ResumeScorer] = None

FILE_ERROR_SUGGESTION = "An error occurred while processing the file. Please try a different file format."


# -----------------------------
# FastAPI App Initialization
# -----------------------------
@asynccontextmanager
async def lifespan_manager(app: FastAPI):
    """Initialize and clean up resources for the app lifecycle."""
    global scorer
    logger.info("Initializing ResumeScorer...")
    scorer = ResumeScorer()
    logger.info("Service startup completed")
    try:
        yield
    finally:
        logger.info("Shutting down service")


fastapi_app = FastAPI(
    title="SkillLens Resume Analyzer API",
    description="""Rule-based resume analysis:
        - Section coverage scoring
        - Action verb and keyword bonus
        - Improvement suggestions""",
    version="1.0.0",
    lifespan=lifespan_manager,
    docs_url="/api/docs",
    redoc_url="/api/redoc"
)

# Enable CORS so the page can call the API from another origin
fastapi_app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_scorer() -> ResumeScorer:
    if scorer is None:
        raise HTTPException(status_code=503, detail="Scoring service not available")
    return scorer


# -----------------------------
# API Endpoints
# -----------------------------
@fastapi_app.post("/api/analyze",
                  response_model=AnalysisResult,
                  responses={500: {"model": ErrorResponse}})
async def analyze_resume(request: AnalysisRequest):
    """Score pasted resume text and return improvement suggestions."""
    try:
        return get_scorer().analyze(request.resume_text)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Processing error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail={
                "error": "processing_error",
                "message": "Failed to analyze resume",
                "details": str(e)
            }
        )


@fastapi_app.post("/api/analyze-file", response_model=AnalysisResult)
async def analyze_resume_file(file: UploadFile = File(..., description="Resume file (PDF, DOCX, or TXT)")):
    """
    Extract text from an uploaded resume and score it.
    Files that cannot be read come back as a zero score with a single suggestion.
    """
    service = get_scorer()
    try:
        content = await file.read()
        resume_text = extract_text(content, file.filename, file.content_type)
    except Exception as e:
        logger.error(f"Text extraction failed for {file.filename!r}: {str(e)}", exc_info=True)
        return AnalysisResult(score=0, suggestions=[FILE_ERROR_SUGGESTION])
    return service.analyze(resume_text)


@fastapi_app.get("/api/health")
async def health_check():
    """Service health check."""
    return {
        "status": "healthy",
        "timestamp": datetime.isoformat(datetime.now()),
        "services": {
            "scorer": scorer is not None
        }
    }


@fastapi_app.get("/")
async def root():
    """API information endpoint."""
    return {
        "service": "SkillLens Resume Analyzer API",
        "version": "1.0.0",
        "documentation": {
            "swagger": "/api/docs",
            "redoc": "/api/redoc"
        },
        "endpoints": {
            "analyze": {
                "path": "/api/analyze",
                "methods": ["POST"],
                "description": "Analyze pasted resume text"
            },
            "analyze-file": {
                "path": "/api/analyze-file",
                "methods": ["POST"],
                "description": "Analyze an uploaded PDF, DOCX or TXT resume"
            },
            "health": {
                "path": "/api/health",
                "methods": ["GET"],
                "description": "Service health check"
            }
        }
    }


# -----------------------------
# Main Entrypoint
# -----------------------------
if __name__ == "__main__":
    import sys
    import uvicorn

    port = config.PORT
    for i, arg in enumerate(sys.argv):
        if arg in ("--port", "-p") and i + 1 < len(sys.argv):
            port = int(sys.argv[i + 1])
    uvicorn.run(
        "run:fastapi_app",
        host=config.HOST,
        port=port,
        reload=config.DEBUG,
        log_level="info"
    )
