import logging

import pytest

from ungoliant.io.metawriter import MetaWriter


def test_nothing_created_before_write(tmp_path):
    MetaWriter(tmp_path, "en")
    assert list(tmp_path.iterdir()) == []


def test_write_creates_first_file(tmp_path):
    mw = MetaWriter(tmp_path, "en")
    data = b'{"a": 1}\n'
    assert mw.write(data) == len(data)
    mw.flush()
    assert (tmp_path / "en_meta.jsonl").read_bytes() == data
    assert mw.nb_files == 1
    mw.close_file()


def test_flush_makes_content_visible(tmp_path):
    mw = MetaWriter(tmp_path, "fr")
    mw.write(b"line one\n")
    mw.write(b"line two\n")
    mw.flush()
    assert (tmp_path / "fr_meta.jsonl").read_bytes() == b"line one\nline two\n"
    mw.close_file()


def test_rotation_renames_first_file(tmp_path):
    mw = MetaWriter(tmp_path, "en")
    mw.write(b"first\n")
    mw.create_next_file()
    mw.write(b"second\n")
    mw.create_next_file()
    mw.write(b"third\n")
    mw.close_file()

    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["en_meta_part_1.jsonl", "en_meta_part_2.jsonl", "en_meta_part_3.jsonl"]
    assert (tmp_path / "en_meta_part_1.jsonl").read_bytes() == b"first\n"
    assert (tmp_path / "en_meta_part_2.jsonl").read_bytes() == b"second\n"
    assert (tmp_path / "en_meta_part_3.jsonl").read_bytes() == b"third\n"


def test_write_after_close_opens_next_file(tmp_path):
    mw = MetaWriter(tmp_path, "en")
    mw.write(b"one\n")
    mw.close_file()
    assert mw.file is None
    mw.write(b"two\n")
    mw.close_file()
    assert mw.nb_files == 2
    assert (tmp_path / "en_meta_part_1.jsonl").read_bytes() == b"one\n"
    assert (tmp_path / "en_meta_part_2.jsonl").read_bytes() == b"two\n"
    assert not (tmp_path / "en_meta.jsonl").exists()


def test_close_unopened_warns(tmp_path, caplog):
    mw = MetaWriter(tmp_path, "de")
    with caplog.at_level(logging.WARNING):
        mw.close_file()
    assert any("unopened MetaWriter" in r.getMessage() for r in caplog.records)


def test_existing_file_is_overwritten_in_place(tmp_path):
    (tmp_path / "en_meta.jsonl").write_bytes(b"abcdef")
    mw = MetaWriter(tmp_path, "en")
    mw.write(b"xy")
    mw.close_file()
    assert (tmp_path / "en_meta.jsonl").read_bytes() == b"xycdef"


def test_missing_destination_raises(tmp_path):
    mw = MetaWriter(tmp_path / "missing", "en")
    with pytest.raises(OSError):
        mw.write(b"data")
    assert mw.file is None