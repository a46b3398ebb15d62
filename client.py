# client.py
import logging
from typing import Optional

import requests
from pydantic import ValidationError

import config
from models import AnalysisRequest, AnalysisResult

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    """Raised when the scoring service cannot produce an AnalysisResult."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AnalysisClient:
    """Thin HTTP client for the scoring service's /api/analyze endpoint."""

    def __init__(self, base_url: str = config.BACKEND_URL,
                 timeout: Optional[float] = config.REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def analyze_url(self) -> str:
        return f"{self.base_url}{config.ANALYZE_PATH}"

    def analyze(self, resume_text: str) -> AnalysisResult:
        payload = AnalysisRequest(resume_text=resume_text).model_dump(by_alias=True)
        logger.info(f"Sending {len(resume_text)} characters to {self.analyze_url}")
        try:
            response = self.session.post(
                self.analyze_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise AnalysisError(f"Request to {self.analyze_url} failed: {e}") from e

        if not response.ok:
            raise AnalysisError(
                f"Network response was not ok: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return AnalysisResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise AnalysisError(f"Malformed analysis response: {e}", status_code=response.status_code) from e
