from typing import List

from models import AnalysisResult

# -----------------------------
# Rule tables
# -----------------------------
# (keyword, points, suggestion when the keyword is missing)
SECTION_RULES = [
    ("contact", 10, "Add a clear 'Contact Information' section at the top."),
    ("summary", 15, "Add a 'Professional Summary' or 'Objective' section to quickly state your goals and skills."),
    ("experience", 20, "A 'Work Experience' section is critical. Make sure it highlights your accomplishments, not just duties."),
    ("skills", 20, "Include a dedicated 'Skills' section to list your technical and soft skills."),
    ("education", 10, "Make sure you have an 'Education' section with your degree and institution."),
]

IMAGE_MARKERS = (".png", ".jpg")
IMAGE_PENALTY = 10
IMAGE_SUGGESTION = "Remove your photo. Most ATS systems cannot process images and they take up valuable space."

ACTION_VERB_SUGGESTION = "Use strong action verbs to start bullet points."
KEYWORD_SUGGESTION = "Incorporate more industry-specific keywords."

# (keyword, bonus points, suggestion when the keyword is present)
BONUS_RULES = [
    ("developed", 2, ACTION_VERB_SUGGESTION),
    ("managed", 2, ACTION_VERB_SUGGESTION),
    ("created", 2, ACTION_VERB_SUGGESTION),
    ("javascript", 3, KEYWORD_SUGGESTION),
    ("python", 3, KEYWORD_SUGGESTION),
    ("react", 3, KEYWORD_SUGGESTION),
    ("java", 3, KEYWORD_SUGGESTION),
]
MAX_BONUS = 10


class ResumeScorer:
    """Rule-based ATS scoring of plain resume text."""

    def analyze(self, resume_text: str) -> AnalysisResult:
        """
        Score a resume from 0 to 100 and collect actionable suggestions.
        Checks are case-insensitive substring matches; suggestions keep first-seen order
        and are never repeated.
        """
        content = resume_text.lower()
        score = 0.0
        bonus = 0.0
        suggestions: List[str] = []

        def suggest(text: str):
            if text not in suggestions:
                suggestions.append(text)

        for keyword, points, suggestion in SECTION_RULES:
            if keyword in content:
                score += points
            else:
                suggest(suggestion)

        if any(marker in content for marker in IMAGE_MARKERS):
            score -= IMAGE_PENALTY
            suggest(IMAGE_SUGGESTION)

        for keyword, points, suggestion in BONUS_RULES:
            if keyword in content:
                bonus += points
                suggest(suggestion)

        score += min(bonus, MAX_BONUS)
        final_score = int(max(0, min(100, round(score))))
        return AnalysisResult(score=final_score, suggestions=suggestions)
