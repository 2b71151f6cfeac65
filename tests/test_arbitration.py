from name_segmenter.arbitration import AcceptAllArbitrator, GivenNameArbitrator
from name_segmenter.dictionary import GivenNameReference


def _arbitrator():
    return GivenNameArbitrator(GivenNameReference.from_tokens(["JOSE", "MARIA", "CARMEN", "CARLOS"]))


def test_accept_all_never_vetoes_or_moves():
    arbitrator = AcceptAllArbitrator()
    assert arbitrator.is_valid("JOSE MARIA", "")
    result = arbitrator.arbitrate("JUAN", "CARLOS")
    assert not result.moved_to_given_name
    assert (result.new_given_name, result.new_surname1) == ("JUAN", "CARLOS")


def test_rejects_phrase_opening_with_given_name():
    assert not _arbitrator().is_valid("JOSE MARIA", "JUAN")


def test_rejects_given_name_phrase_with_nothing_left():
    arbitrator = _arbitrator()
    assert not arbitrator.is_valid("DEL CARMEN", "")
    assert arbitrator.is_valid("DEL CARMEN", "MARIA")


def test_accepts_phrase_without_given_names():
    assert _arbitrator().is_valid("DE LA O", "")


def test_arbitrate_moves_single_given_token():
    result = _arbitrator().arbitrate("JUAN", "CARLOS")
    assert result.moved_to_given_name
    assert result.new_given_name == "JUAN CARLOS"
    assert result.new_surname1 == ""


def test_arbitrate_needs_a_given_name():
    result = _arbitrator().arbitrate("", "CARLOS")
    assert not result.moved_to_given_name
    assert result.new_surname1 == "CARLOS"


def test_arbitrate_ignores_compound_surnames():
    result = _arbitrator().arbitrate("JUAN", "DE LA O")
    assert not result.moved_to_given_name
