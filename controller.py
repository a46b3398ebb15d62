# controller.py
import logging
import math
import time
from typing import Callable, Optional

import config
from client import AnalysisClient, AnalysisError
from models import AnalysisResult
from page import PageView, MessageKind, EMPTY_RING_OFFSET, ring_offset_for

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please upload a file or paste your resume content."
WRONG_FILE_TYPE_MESSAGE = "Please upload a plain text (.txt) file."
ANALYSIS_FAILED_MESSAGE = "An error occurred during analysis. Please ensure your backend is running."
NO_SUGGESTIONS_MESSAGE = "Your resume looks great! No major suggestions at this time."

ACCEPTED_MEDIA_TYPE = "text/plain"


class PageController:
    """
    Drives the analysis page: takes typed or uploaded resume text, sends it to
    the scoring service and renders the score and suggestions into a PageView.

    ``on_update`` is called with the view after every visible change so a
    renderer can redraw, including once per step of the score animation.
    """

    def __init__(self, view: PageView, client: Optional[AnalysisClient] = None,
                 tick_seconds: float = config.SCORE_TICK_SECONDS,
                 sleep: Callable[[float], None] = time.sleep,
                 on_update: Optional[Callable[[PageView], None]] = None):
        self.view = view
        self.client = client or AnalysisClient()
        self.tick_seconds = tick_seconds
        self._sleep = sleep
        self._on_update = on_update
        self._generation = 0

    def _changed(self):
        if self._on_update is not None:
            self._on_update(self.view)

    # -----------------------------
    # Input
    # -----------------------------
    def submit_typed_text(self):
        resume_text = self.view.text_area.strip()
        if resume_text:
            self.begin_analysis(resume_text)
        else:
            self.view.show_message(EMPTY_INPUT_MESSAGE, MessageKind.INVALID_INPUT)
            self._changed()

    def handle_file_selection(self, file):
        if file is None:
            return

        if getattr(file, "type", None) != ACCEPTED_MEDIA_TYPE:
            logger.info(f"Rejected upload {getattr(file, 'name', '?')!r} of type {getattr(file, 'type', None)!r}")
            self.view.show_message(WRONG_FILE_TYPE_MESSAGE, MessageKind.INVALID_INPUT)
            self.view.file_selector = None
            self._changed()
            return

        self.view.file_selector = getattr(file, "name", None)
        resume_text = read_text(file)
        self.view.text_area = resume_text
        self._changed()
        self.begin_analysis(resume_text)

    # -----------------------------
    # Analysis
    # -----------------------------
    def begin_analysis(self, resume_text: str):
        self._generation += 1
        generation = self._generation

        self.view.upload_visible = False
        self.view.spinner_visible = True
        self._changed()

        try:
            result = self.client.analyze(resume_text)
        except AnalysisError as e:
            if generation != self._generation:
                logger.info(f"Ignoring failure of superseded request #{generation}")
                return
            logger.error(f"Error during analysis: {e}", exc_info=True)
            self.view.show_message(ANALYSIS_FAILED_MESSAGE, MessageKind.ANALYSIS_FAILURE)
            self.reset_ui()
            return

        if generation != self._generation:
            logger.info(f"Ignoring stale result of request #{generation}")
            return
        self.render_results(result)

    def render_results(self, result: AnalysisResult):
        self.view.spinner_visible = False
        self.view.results_visible = True

        self.view.ring_offset = ring_offset_for(result.score)

        self.view.suggestions = list(result.suggestions) or [NO_SUGGESTIONS_MESSAGE]
        self._changed()

        self._count_up(math.ceil(result.score))

    def _count_up(self, target: int):
        current = 0
        while current < target:
            current += 1
            self._sleep(self.tick_seconds)
            self.view.score_text = str(current)
            self._changed()

    def reset_ui(self):
        self.view.upload_visible = True
        self.view.spinner_visible = False
        self.view.results_visible = False
        self.view.score_text = "0"
        self.view.ring_offset = EMPTY_RING_OFFSET
        self.view.suggestions = []
        self.view.file_selector = None
        self.view.text_area = ""
        self._changed()


def read_text(file) -> str:
    """Decode an uploaded file's full contents as UTF-8."""
    if hasattr(file, "getvalue"):
        content = file.getvalue()
    else:
        content = file.read()
    if isinstance(content, str):
        return content
    return content.decode("utf-8", errors="replace")
