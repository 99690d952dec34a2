import pytest

from ungoliant.io.writer_base import WriterTrait


class ListWriter(WriterTrait):
    def __init__(self):
        self.items = []
        self.closed = 0

    def write(self, vals):
        self.items.extend(vals)

    def write_single(self, val):
        self.items.append(val)

    def close_meta(self):
        self.closed += 1


class Incomplete(WriterTrait):
    def write(self, vals):
        pass

    def write_single(self, val):
        pass


def test_cannot_instantiate_abstract():
    with pytest.raises(TypeError):
        WriterTrait()
    with pytest.raises(TypeError):
        Incomplete()


def test_context_manager_returns_writer_and_closes():
    writer = ListWriter()
    entered = WriterTrait.__enter__(writer)
    assert entered is writer
    entered.write(["a", "b"])
    entered.write_single("c")
    assert writer.closed == 0
    WriterTrait.__exit__(writer, None, None, None)
    assert writer.closed == 1
    assert writer.items == ["a", "b", "c"]


def test_context_manager_closes_on_error():
    writer = ListWriter()
    with pytest.raises(RuntimeError):
        with writer:
            raise RuntimeError("boom")
    assert writer.closed == 1

    err = RuntimeError("again")
    suppressed = WriterTrait.__exit__(writer, RuntimeError, err, None)
    assert not suppressed
    assert writer.closed == 2