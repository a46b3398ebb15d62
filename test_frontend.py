from streamlit.testing.v1 import AppTest


def test_page_renders_with_plain_title():
    at = AppTest.from_file("frontend.py").run()

    assert not at.exception
    assert at.title[0].value == "SkillLens: Smart Resume Analyzer"
    assert "—" not in at.title[0].value
    assert [b.label for b in at.button] == ["Analyze Resume"]
