import pytest

from contactkit.models import FALLBACK_NAME
from contactkit.names import (
    is_noise_token,
    reconstruct_name,
    split_at_midpoint,
    split_compound,
    split_on_case,
    split_on_first_names,
    split_on_last_names,
    strip_suffixes,
)


def test_plain_two_part_slug() -> None:
    assert reconstruct_name("john-smith") == "John Smith"


def test_numeric_suffix_is_stripped() -> None:
    assert reconstruct_name("john-smith-12345") == "John Smith"


def test_professional_suffix_is_stripped() -> None:
    assert reconstruct_name("john-smith-phd") == "John Smith"


def test_hex_hash_suffix_is_stripped() -> None:
    assert reconstruct_name("john-smith-a1b2c3d4e5") == "John Smith"


def test_empty_slug_falls_back() -> None:
    assert reconstruct_name("") == FALLBACK_NAME == "LinkedIn Contact"


def test_all_noise_tokens_fall_back() -> None:
    assert reconstruct_name("a-1-the-of") == "LinkedIn Contact"


def test_whitespace_only_slug_falls_back() -> None:
    assert reconstruct_name("   ") == "LinkedIn Contact"


def test_mc_prefix_is_recapitalized() -> None:
    assert reconstruct_name("mcdonald") == "McDonald"
    assert reconstruct_name("john-mcgregor") == "John McGregor"


def test_o_apostrophe_is_recapitalized() -> None:
    assert reconstruct_name("shane-o'connor") == "Shane O'Connor"


def test_van_and_de_particles_are_lowercased() -> None:
    assert reconstruct_name("ludwig-van-beethoven") == "Ludwig van Beethoven"
    assert reconstruct_name("maria-de-souza") == "Maria de Souza"


def test_compound_token_split_on_first_name() -> None:
    assert reconstruct_name("stefaniemarrone-cpa-123") == "Stefanie Marrone"


def test_compound_token_split_on_last_name_keeps_position() -> None:
    assert reconstruct_name("xavierrodriguez") == "Xavier Rodriguez"


def test_compound_token_split_on_case_transition() -> None:
    assert reconstruct_name("QuillonDrevasta") == "Quillon Drevasta"


def test_long_token_without_match_is_capitalized_whole() -> None:
    assert reconstruct_name("qwrtzxcvbnmplk") == "Qwrtzxcvbnmplk"


def test_filters_stopwords_numbers_and_initials() -> None:
    assert reconstruct_name("the-john-of-smith") == "John Smith"
    assert reconstruct_name("john-123-smith") == "John Smith"
    assert reconstruct_name("j-smith") == "Smith"


def test_drops_mixed_alphanumeric_ids() -> None:
    assert reconstruct_name("john2020-smith") == "Smith"


def test_keeps_only_first_four_words() -> None:
    assert reconstruct_name("one-two-three-four-five") == "One Two Three Four"


def test_long_names_are_cut_to_three_words() -> None:
    name = reconstruct_name("constantinos-bartholomews-maximilianus-christophers")
    assert name == "Constantinos Bartholomews Maximilianus"


def test_suffixes_are_stripped_once() -> None:
    assert strip_suffixes("john-smith-phd-123") == "john-smith"
    assert strip_suffixes("john-smith-jr-phd") == "john-smith-jr"
    assert reconstruct_name("john-smith-jr-phd") == "John Smith Jr"


def test_non_ascii_slug_keeps_accents() -> None:
    assert reconstruct_name("josé-garcía") == "José García"


@pytest.mark.parametrize("slug", [
    "",
    "-",
    "---",
    "12345",
    "-123",
    "x-y-z",
    "ThE-AnD",
    "a" * 200,
    "-".join(["verylongname"] * 10),
    "stefaniemarrone-cpa-123",
    "deadbeefcafe-0001",
])
def test_output_is_bounded_and_non_empty(slug: str) -> None:
    name = reconstruct_name(slug)
    assert name
    assert len(name.split()) <= 4
    assert len(name) <= 50


def test_reconstruction_is_deterministic() -> None:
    slug = "annamariabrown-mba-9981"
    assert reconstruct_name(slug) == reconstruct_name(slug)


def test_split_compound_first_dictionary_match_wins() -> None:
    # "maria" is listed before "anna", so it is the match even though it is not at offset 0
    assert split_compound("annamariabrown") == ["annabrown", "maria"]


def test_split_compound_returns_token_when_nothing_applies() -> None:
    assert split_compound("qwrtzxcvbnmplk") == ["qwrtzxcvbnmplk"]


def test_split_compound_uses_midpoint_for_medium_tokens() -> None:
    assert split_compound("qwrtzxcvbn") == ["qwrtz", "xcvbn"]


def test_split_at_midpoint_bounds() -> None:
    assert split_at_midpoint("qwrtzxcv") is None
    assert split_at_midpoint("qwrtzxcvbnmplk") is None


def test_split_on_case_requires_three_letter_parts() -> None:
    assert split_on_case("AnnaGreen") == ["Anna", "Green"]
    assert split_on_case("AnGreen") is None
    assert split_on_case("annagreen") is None


def test_is_noise_token() -> None:
    assert is_noise_token("a")
    assert is_noise_token("with")
    assert is_noise_token("2024")
    assert is_noise_token("ab12")
    assert not is_noise_token("j2")
    assert not is_noise_token("smith")


def test_short_leftover_after_first_dictionary_hit_stops_the_dictionary_pass() -> None:
    # "christopher" leaves only "jo"; the later "chris" entry must not be tried
    assert split_on_first_names("christopherjo") is None
    assert split_compound("christopherjo") == ["christopherjo"]
    assert reconstruct_name("christopherjo") == "Christopherjo"


def test_short_leftover_after_last_name_hit_stops_the_last_name_pass() -> None:
    assert split_on_last_names("xyrodriguez") is None
    assert split_on_last_names("xavierrodriguez") == ["xavier", "rodriguez"]


def test_particles_after_an_apostrophe_keep_their_case() -> None:
    assert reconstruct_name("o'de-smith") == "O'De Smith"
    assert reconstruct_name("maria-de-souza") == "Maria de Souza"
