import pytest

from ungoliant.errors import UngoliantError, UnknownLangError
from ungoliant.lang import Lang


def test_unknown_lang_keeps_lang():
    err = UnknownLangError("klingon")
    assert err.lang == "klingon"
    assert "klingon" in str(err)


def test_unknown_lang_is_package_error_and_value_error():
    with pytest.raises(ValueError) as info:
        Lang.parse("zz")
    assert isinstance(info.value, UngoliantError)
    assert isinstance(info.value, UnknownLangError)
    assert info.value.lang == "zz"


def test_raised_by_lang_parse():
    with pytest.raises(UnknownLangError) as info:
        Lang.parse("not-a-lang")
    assert info.value.lang == "not-a-lang"


def test_catchable_as_base():
    with pytest.raises(UngoliantError):
        Lang.parse("")