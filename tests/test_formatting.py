import pytest

from name_segmenter.formatting import (
    OutputFormat,
    format_name,
    title_case,
    to_full_hyphen,
    to_natural,
    to_standard,
)
from name_segmenter.segmenter import SegmentedName


def _juan():
    return SegmentedName(
        full_name="JUAN DE LA O VARGAS",
        given_name="Juan",
        surname1="De La O",
        surname2="Vargas",
        is_compound=True,
    )


def test_title_case_lowers_particles_after_first_word():
    assert title_case("SAN JOSE DE LA MONTAÑA") == "San Jose de la Montaña"
    assert title_case("maria santa cruz") == "Maria santa Cruz"


def test_title_case_without_particles():
    assert title_case("DE LA O", lower_particles=False) == "De La O"


def test_title_case_capitalizes_after_hyphen():
    assert title_case("garcia-lopez") == "Garcia-Lopez"


def test_standard_format():
    formatted = to_standard(_juan())
    assert formatted.full_name == "Juan De-La-O-Vargas"
    assert formatted.given_name == "Juan"
    assert formatted.surname == "De-La-O-Vargas"


def test_natural_format():
    formatted = to_natural(_juan())
    assert formatted.full_name == "Juan de la O Vargas"
    assert formatted.given_name == "Juan"
    assert formatted.surname == "de la O Vargas"


def test_full_hyphen_format():
    formatted = to_full_hyphen(_juan())
    assert formatted.full_name == "Juan-De-La-O-Vargas"
    assert formatted.surname == "De-La-O-Vargas"


def test_standard_without_second_surname_has_no_stray_hyphens():
    parsed = SegmentedName(full_name="JUAN CARLOS PEREZ", given_name="JUAN CARLOS", surname1="PEREZ")
    formatted = to_standard(parsed)
    assert formatted.full_name == "Juan Carlos Perez"
    assert "--" not in formatted.full_name
    assert not formatted.surname.endswith("-")


def test_full_hyphen_with_multiword_given_name():
    parsed = SegmentedName(
        full_name="JUAN CARLOS PEREZ LOPEZ",
        given_name="JUAN CARLOS",
        surname1="PEREZ",
        surname2="LOPEZ",
    )
    formatted = to_full_hyphen(parsed)
    assert formatted.full_name == "Juan-Carlos-Perez-Lopez"
    assert formatted.given_name == "Juan-Carlos"


def test_natural_replaces_hyphens():
    parsed = SegmentedName(full_name="ANA-MARIA DEL VALLE", given_name="ANA-MARIA", surname1="DEL VALLE")
    formatted = to_natural(parsed)
    assert formatted.full_name == "Ana Maria del Valle"
    assert formatted.given_name == "Ana Maria"


@pytest.mark.parametrize("fmt", list(OutputFormat))
def test_empty_name_formats_to_empty_strings(fmt):
    formatted = format_name(SegmentedName(full_name=""), fmt)
    assert formatted.full_name == ""
    assert formatted.surname == ""


def test_format_name_accepts_string_values():
    assert format_name(_juan(), "natural").full_name == "Juan de la O Vargas"
    assert format_name(_juan()).full_name == "Juan De-La-O-Vargas"


def test_format_name_rejects_unknown_format():
    with pytest.raises(ValueError):
        format_name(_juan(), "shouting")
