from ungoliant.filtering.record import PFilter
from ungoliant.filtering.sentence import Length

_INDENT = " " * 8

FAIL_BODY = "\n".join(
    [
        "short sentence",
        _INDENT + "short sentence",
        _INDENT + "short sentence",
        _INDENT + "list entry",
        _INDENT + "list entry",
        _INDENT + "list entry",
        _INDENT + "list entry",
        _INDENT + "list entry",
        _INDENT + "list entry",
        _INDENT + "list entry",
        "",
        _INDENT
        + "annoyingly long sentence about cookies and consent annoyingly long "
        "sentence about cookies and consent annoyingly long sentence about "
        "cookies and consent",
        _INDENT,
    ]
)

SUCCESS_BODY = "\n".join(
    [
        "short sentence (title)",
        "",
        _INDENT + "short sentence (subtitle)",
        _INDENT,
        _INDENT
        + "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Curabitur "
        "sagittis, libero nec varius aliquam, odio tortor commodo leo, quis "
        "posuere enim neque et justo. Aliquam sollicitudin magna varius sem "
        "cursus volutpat. Fusce accumsan tellus quis tellus sollicitudin "
        "tincidunt. Integer ullamcorper euismod ipsum, vel tempor purus "
        "scelerisque vel. Aenean eleifend pulvinar consectetur. Morbi eu massa "
        "eget ipsum vestibulum gravida. Mauris placerat neque ac tortor "
        "vestibulum iaculis. Suspendisse consectetur ex eget enim ultricies "
        "bibendum. Nulla non congue mi, a tempus est. Morbi non ante ante.",
        "",
        _INDENT
        + "Nunc a vulputate orci, et pharetra mi. Aliquam vitae dolor orci. Sed "
        "ultrices turpis ligula, sit amet venenatis tellus consectetur non. Sed "
        "finibus blandit quam. Curabitur vel blandit tellus, a condimentum "
        "nunc. Etiam turpis odio, auctor et nulla id, placerat scelerisque "
        "nunc. In egestas elit non elit aliquet luctus. Proin quis aliquet "
        "diam. Quisque maximus in orci nec pellentesque. Etiam sodales mi vitae "
        "massa euismod laoreet. ",
        "",
        _INDENT + "annoying cookie thingy.",
        _INDENT,
    ]
)


def test_pfilter_fail():
    f = PFilter()
    assert f.detect(FAIL_BODY) is False


def test_pfilter_success():
    f = PFilter()
    assert f.detect(SUCCESS_BODY) is True


def test_pfilter_accepts_bytes():
    f = PFilter()
    assert f.detect(SUCCESS_BODY.encode("utf-8")) is True
    assert f.detect(FAIL_BODY.encode("utf-8")) is False


def test_pfilter_empty_body_is_kept():
    assert PFilter().detect("") is True


def test_pfilter_invalid_utf8_does_not_raise():
    body = b"\xff\xfe short\n" + b"x" * 200
    assert PFilter().detect(body) is True


def test_pfilter_line_at_min_size_counts_as_long():
    f = PFilter(sentence_threshold=0.5, sentence_filter=Length(min_size=5))
    assert f.detect("abcde\nab") is True
    assert f.detect("abcd\nab") is False


def test_pfilter_defaults():
    f = PFilter()
    assert f.sentence_threshold == 0.6
    assert f.sentence_filter.min_size == 100