import pytest

from keylibrary.errors import SelectionError
from keylibrary.key_codes import KeyCode
from keylibrary.selection import SelectionRequest, SelectionState


def test_new_request_is_pending():
    request = SelectionRequest("save")

    assert request.is_pending
    assert request.candidate is None
    assert request.selected_key is None


def test_confirm_uses_last_highlighted_key():
    request = SelectionRequest("save")
    request.highlight(KeyCode.A)
    request.highlight(KeyCode.S)

    assert request.confirm() is KeyCode.S
    assert request.state is SelectionState.CONFIRMED
    assert request.selected_key is KeyCode.S


def test_confirm_without_candidate_raises():
    request = SelectionRequest("save")

    with pytest.raises(SelectionError):
        request.confirm()
    assert request.is_pending


def test_cancel_leaves_no_selection():
    request = SelectionRequest("save")
    request.highlight(KeyCode.A)
    request.cancel()

    assert request.state is SelectionState.CANCELLED
    assert request.selected_key is None


def test_request_completes_once():
    request = SelectionRequest("save")
    request.cancel()

    with pytest.raises(SelectionError):
        request.cancel()
    request.highlight(KeyCode.A)
    assert request.candidate is None


def test_callbacks_fire_on_completion():
    seen = []
    request = SelectionRequest("save")
    request.on_complete(lambda r: seen.append(r.selected_key))
    request.highlight(KeyCode.Q)

    assert seen == []
    request.confirm()
    assert seen == [KeyCode.Q]

    request.on_complete(lambda r: seen.append(r.state))
    assert seen == [KeyCode.Q, SelectionState.CONFIRMED]
