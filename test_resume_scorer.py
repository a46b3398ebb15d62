import pytest

from resume_scorer import ResumeScorer, IMAGE_SUGGESTION, ACTION_VERB_SUGGESTION, KEYWORD_SUGGESTION, SECTION_RULES


@pytest.fixture
def scorer():
    return ResumeScorer()


def test_complete_resume_scores_sections_and_bonus(scorer):
    text = "Contact: jane@example.com\nSummary\nExperience: Developed Python services\nSkills\nEducation"
    result = scorer.analyze(text)
    assert result.score == 80
    assert result.suggestions == [ACTION_VERB_SUGGESTION, KEYWORD_SUGGESTION]


def test_empty_resume_gets_every_section_suggestion(scorer):
    result = scorer.analyze("")
    assert result.score == 0
    assert result.suggestions == [suggestion for _, _, suggestion in SECTION_RULES]


def test_photo_penalty_never_goes_below_zero(scorer):
    result = scorer.analyze("see headshot.png")
    assert result.score == 0
    assert result.suggestions[-1] == IMAGE_SUGGESTION


def test_photo_penalty_applies(scorer):
    result = scorer.analyze("contact summary experience skills education me.jpg")
    assert result.score == 65
    assert result.suggestions == [IMAGE_SUGGESTION]


def test_bonus_is_capped_and_suggestions_not_repeated(scorer):
    result = scorer.analyze("developed managed created javascript python react")
    assert result.score == 10
    assert result.suggestions.count(ACTION_VERB_SUGGESTION) == 1
    assert result.suggestions.count(KEYWORD_SUGGESTION) == 1
    assert len(result.suggestions) == 7
