from unittest import mock

import pytest

import render
from page import PageView, MessageKind


@pytest.fixture
def fake_st():
    with mock.patch.object(render, "st") as st:
        st.columns.side_effect = lambda spec: [mock.MagicMock(), mock.MagicMock(**{"button.return_value": False})]
        yield st


def test_messages_are_drawn_until_they_expire(fake_st):
    view = PageView(message_ttl=5)
    view.show_message("Please upload a plain text (.txt) file.", MessageKind.INVALID_INPUT, now=100.0)

    shown = render.render_messages(view, now=102.0)
    assert [m.text for m in shown] == ["Please upload a plain text (.txt) file."]
    assert fake_st.columns.call_count == 1

    fake_st.columns.reset_mock()
    assert render.render_messages(view, now=105.0) == []
    fake_st.columns.assert_not_called()
    assert view.messages == []


def test_dismiss_button_removes_message(fake_st):
    dismiss_col = mock.MagicMock(**{"button.return_value": True})
    fake_st.columns.side_effect = lambda spec: [mock.MagicMock(), dismiss_col]
    view = PageView()
    view.show_message("An error occurred during analysis.", MessageKind.ANALYSIS_FAILURE)

    render.render_messages(view)

    assert view.messages == []
    fake_st.rerun.assert_called_once()
