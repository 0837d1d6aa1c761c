import pytest

from keylibrary.key_codes import KeyCode
from keylibrary.key_library import KeyLibrary

A, B, C = KeyCode.A, KeyCode.B, KeyCode.C


@pytest.fixture
def single():
    return KeyLibrary([A, B], multi=False)


@pytest.fixture
def multi():
    return KeyLibrary([A, B], multi=True)


def test_new_library_has_every_key_empty(single):
    for key in (A, B):
        assert single.labels_for(key) == ()
        assert not single.is_occupied(key)
    assert single.valid_keys == (A, B)
    assert len(single) == 2


def test_unknown_identifiers_are_dropped():
    library = KeyLibrary([A, "not-a-key", None, B, A])

    assert library.valid_keys == (A, B)
    assert "not-a-key" not in library


def test_checkout_invalid_key_changes_nothing(single):
    assert single.checkout_key("save", C) is False
    assert single.labels_for(C) == ()
    assert single.occupied_keys() == []


def test_single_mode_refuses_second_label(single):
    assert single.checkout_key("save", A) is True
    assert single.checkout_key("load", A) is False
    assert single.labels_for(A) == ("save",)


def test_multi_mode_keeps_checkout_order(multi):
    assert multi.checkout_key("save", A) is True
    assert multi.checkout_key("load", A) is True
    assert multi.labels_for(A) == ("save", "load")


def test_return_from_key_removes_only_that_label(multi):
    multi.checkout_key("save", A)
    multi.checkout_key("load", A)

    assert multi.return_key("save", A) is True
    assert multi.labels_for(A) == ("load",)


def test_return_missing_label_leaves_state(multi):
    multi.checkout_key("save", A)

    assert multi.return_key("quit", A) is False
    assert multi.return_key("save", B) is False
    assert multi.return_key("save", C) is False
    assert multi.labels_for(A) == ("save",)


def test_return_from_key_removes_first_occurrence_only(multi):
    multi.checkout_key("save", A)
    multi.checkout_key("save", A)

    assert multi.return_key("save", A) is True
    assert multi.labels_for(A) == ("save",)


def test_bulk_return_clears_every_key(single):
    single.checkout_key("jump", A)
    single.checkout_key("jump", B)
    assert single.keys_for("jump") == [A, B]

    assert single.return_key("jump") is True
    assert single.occupied_keys() == []
    assert single.return_key("jump") is False


def test_checkout_then_return_restores_occupancy(single):
    before = single.is_occupied(B)
    single.checkout_key("fire", B)
    single.return_key("fire", B)
    assert single.is_occupied(B) == before


def test_labels_for_returns_a_copy(multi):
    multi.checkout_key("save", A)
    labels = multi.labels_for(A)

    multi.checkout_key("load", A)

    assert labels == ("save",)


def test_scenario_save_and_load():
    library = KeyLibrary([A, B], multi=False)

    assert library.checkout_key("save", A) is True
    assert library.checkout_key("load", A) is False
    assert library.checkout_key("load", B) is True
    assert library.return_key("save", A) is True
    assert library.is_occupied(A) is False
    assert library.return_key("save") is False


class TestInteractiveCheckout:
    def test_cancel_changes_nothing(self, single):
        prompts = []

        def selector(label):
            prompts.append(label)
            return None

        assert single.checkout_key_interactive("save", selector) is None
        assert prompts == ["save"]
        assert single.occupied_keys() == []

    def test_picked_key_is_checked_out(self, single):
        assert single.checkout_key_interactive("save", lambda label: B) is B
        assert single.labels_for(B) == ("save",)

    def test_picked_key_returned_even_when_refused(self, single):
        single.checkout_key("save", A)

        assert single.checkout_key_interactive("load", lambda label: A) is A
        assert single.labels_for(A) == ("save",)

    def test_picked_invalid_key_is_returned(self, single):
        assert single.checkout_key_interactive("save", lambda label: C) is C
        assert single.labels_for(C) == ()
