import pytest

from ungoliant.errors import UnknownLangError
from ungoliant.lang import LANG, Lang, LangFiles


@pytest.mark.parametrize("code", sorted(LANG))
def test_parse_every_known_code(code):
    assert Lang.parse(code).value == code


def test_lang_set_matches_enum():
    parsed = {Lang.parse(code) for code in LANG}
    assert parsed == set(Lang)
    assert len(LANG) == len(Lang)
    assert Lang.parse("multi") is Lang.MULTI


def test_parse_and_display():
    assert Lang.parse("fr") is Lang.FR
    assert str(Lang.FR) == "fr"
    assert Lang.EN.to_static() == "en"
    assert str(Lang.MULTI) == "multi"


def test_display_quirks():
    assert Lang.CBK.to_static() == "cbr"
    assert Lang.YI.to_static() == "vi"
    assert Lang.parse("yi") is Lang.YI
    assert Lang.YI is not Lang.VI


def test_display_round_trip_except_quirks():
    quirky = {Lang.CBK, Lang.YI}
    for lang in Lang:
        if lang not in quirky:
            assert Lang.parse(str(lang)) is lang


def test_parse_unknown():
    with pytest.raises(UnknownLangError):
        Lang.parse("xx_unknown")


def test_parse_is_case_sensitive():
    with pytest.raises(UnknownLangError):
        Lang.parse("FR")


def test_langfiles_creates_files(tmp_path):
    with LangFiles(tmp_path) as lf:
        handle = lf.get("fr")
        handle.write(b"bonjour\n")
        handle.flush()
        assert lf.get("zz") is None
    created = {p.name for p in tmp_path.iterdir()}
    assert created == {f"{code}.txt" for code in LANG}
    assert (tmp_path / "fr.txt").read_bytes() == b"bonjour\n"


def test_langfiles_appends(tmp_path):
    (tmp_path / "en.txt").write_bytes(b"first\n")
    with LangFiles(tmp_path) as lf:
        lf.get("en").write(b"second\n")
    assert (tmp_path / "en.txt").read_bytes() == b"first\nsecond\n"


def test_langfiles_closes(tmp_path):
    lf = LangFiles(tmp_path)
    handle = lf.get("de")
    lf.close()
    assert handle.closed


def test_langfiles_missing_dir(tmp_path):
    with pytest.raises(OSError):
        LangFiles(tmp_path / "does-not-exist")