from name_segmenter.dictionary import CompoundDictionary, GivenNameReference


def test_from_sources_flattens_and_normalizes():
    dictionary = CompoundDictionary.from_sources([["de la o", " Van  Der Berg "], ["DE LA O", "PEREZ", ""]])

    assert set(dictionary.entries) == {"DE LA O", "VAN DER BERG"}
    assert dictionary.contains("VAN DER BERG")
    assert "PEREZ" not in dictionary
    assert dictionary.max_words == 3
    assert len(dictionary) == 2


def test_empty_dictionary_has_no_window():
    dictionary = CompoundDictionary.from_sources([])
    assert dictionary.max_words == 0
    assert not dictionary.contains("DE LA O")


def test_iteration_yields_longest_phrases_first():
    dictionary = CompoundDictionary.from_sources([["LA O", "ESPINOZA DE LOS MONTEROS", "DE LA O"]])
    assert list(dictionary) == ["ESPINOZA DE LOS MONTEROS", "DE LA O", "LA O"]


def test_given_names_from_tokens_skips_phrases():
    reference = GivenNameReference.from_tokens(["carlos", "Ana", "maria jose", ""])
    assert set(reference.tokens) == {"CARLOS", "ANA"}
    assert "CARLOS" in reference


def test_given_names_from_frequencies_applies_threshold():
    counts = {"carlos": 900, "ana": 600, "lu": 9999, "maria": 5000, "pedro": 500, "del": 7000}
    reference = GivenNameReference.from_frequencies(counts)
    assert set(reference.tokens) == {"CARLOS", "ANA"}


def test_empty_reference_is_falsy():
    assert not GivenNameReference()


def test_given_names_from_frequencies_honors_normalization_options():
    folded = GivenNameReference.from_frequencies({"andrés": 900}, fold_accents=True)
    assert set(folded.tokens) == {"ANDRES"}

    repaired = GivenNameReference.from_frequencies({"AndrÃ©s": 900}, fix_encoding=True)
    assert set(repaired.tokens) == {"ANDRÉS"}
