# ungoliant

Building blocks for generating multilingual text corpora from web-crawl
shards: a fixed set of corpus languages, sentence- and document-level
filters, language-identification helpers, multilinguality checks, rotating
per-language text and metadata writers, a reader for blank-line separated
text records, and an asynchronous shard downloader.

## Installation

```sh
pip install .
```

To run the test suite:

```sh
pip install ".[test]"
pytest
```

## Command line

The `ungoliant` command has a single subcommand, `download`, which fetches
the shards listed in a `wet.paths` file (one path per line, relative to
`https://data.commoncrawl.org/`) into an existing destination directory.
Each shard is saved as `<index>.txt.gz`, where `<index>` is the line's
position in the paths file.

```sh
ungoliant download wet.paths shards/ -t 4 -o 0
```

- `-t` sets how many downloads run at the same time (4 by default).
- `-o` skips that many entries at the start of the paths file (0 by default).

Failed downloads are logged. HTTP failures are also recorded in
`errors.txt`, in the current directory, as `<url>\t<index>` lines so that
they can be fetched again later.

The same can be done from Python with `ungoliant.cli.run_download`, or with
`ungoliant.download.Downloader` directly:

```python
import asyncio
from ungoliant.download import Downloader

downloader = Downloader.from_paths_file("wet.paths", n_tasks=4)
results = asyncio.run(downloader.download("shards", idx_offset=0))
# each result is the saved Path, or the exception raised for that file
```

HTTP failures come back as `ungoliant.download.DownloadError`, carrying the
`url`, destination `path`, `index` and underlying `cause`.

## Library

### Languages

```python
from ungoliant.lang import LANG, Lang

fr = Lang.parse("fr")
print(fr.to_static())   # "fr"
print(str(fr))          # "fr"
"en" in LANG            # True: LANG is the set of corpus language codes
```

Parsing an unknown code raises `ungoliant.errors.UnknownLangError`, a
subclass of both `ungoliant.errors.UngoliantError` and `ValueError`.

`ungoliant.lang.LangFiles` opens `<lang>.txt` for every corpus language in a
directory (reading and appending, created if missing) and is used as a
context manager:

```python
from ungoliant.lang import LangFiles

with LangFiles("out") as files:
    handle = files.get("fr")    # None for a code without a file
```

### Filters

`Filter` and `FilterMut` in `ungoliant.filtering.base` are the interfaces:
`detect` is read-only, `detect_mut` may update the filter's state.

```python
from ungoliant.filtering.sentence import Length, MeanLength
from ungoliant.filtering.record import PFilter

Length().detect("z" * 101)      # True: longer than 100 code points

sentences = ["a" * n for n in (90, 95, 100, 105, 110)]
mean = MeanLength()
for sentence in sentences:
    mean.detect_mut(sentence)   # learns the running mean and standard deviation
mean.detect("a" * 102)          # within one standard deviation of the mean?
mean.mean(), mean.std()

PFilter().detect("a document body\nwith some lines")
```

`PFilter` accepts text or bytes and keeps a document when at least 60% of
its characters (by default) are in lines of 100 code points or more.

### Identification and multilinguality

`ungoliant.identifiers.identification.Identification` pairs a `Lang` with a
probability. It can be built from a `Prediction` whose label has the form
`__label__xx`, and converted to and from `{"label": ..., "prob": ...}` with
`to_dict` and `from_dict`.

`ungoliant.identifiers.fasttext.FastText` wraps any prediction model with a
`predict(text, k, threshold)` method returning `Prediction` objects;
`FastText.predict` strips the `__label__` prefix from the labels and returns
`None` when the model gives nothing. `FastText.identify` does not use the
model: it always labels a line as Thai (`Lang.TH`), with the share of Thai
script characters as probability. `FastText.get_weighted_ids` identifies
each line of a document (null characters removed) and returns the per-line
identifications, a mapping from language to `(byte_count, weighted_prob)`,
and the total byte count.

`Multilingual` and `StrictMultilingual` in
`ungoliant.identifiers.multilingual` decide whether a sequence of per-line
identifications (`None` for unidentified lines) describes a multilingual
document. `StrictMultilingual.detect_weighted` takes
`(identification, byte_count)` pairs instead.

```python
from ungoliant.identifiers.identification import Identification
from ungoliant.identifiers.multilingual import Multilingual
from ungoliant.lang import Lang

en = Identification(Lang.EN, 1.0)
fr = Identification(Lang.FR, 1.0)
Multilingual().detect([en, en, fr, fr] * 5)    # True
```

### Reading and writing corpus files

```python
from pathlib import Path
from ungoliant.io.textreader import TextReader
from ungoliant.io.textwriter import TextWriter

Path("out").mkdir(exist_ok=True)
with TextWriter("out", "en", 10_000) as writer:
    writer.write(b"first document\nwith two lines")

for record in TextReader.open("out", "en"):
    print(record)               # ["first document", "with two lines"]
```

`TextWriter` follows every write with a blank line and rotates to a new
part file when a write would pass the size limit (unless the current file
is still empty). The first file is `en.txt`; once a second part is needed
it is renamed `en_part_1.txt` and followed by `en_part_2.txt` and so on.
`first_write_on_document` is set whenever a new file is started.

`ungoliant.io.metawriter.MetaWriter` writes `<lang>_meta.jsonl` files with
the same naming and renaming, but only rotates when `create_next_file` is
called. `ungoliant.io.writer_base.WriterTrait` is the interface for
per-language writers (`write`, `write_single`, `close_meta`).

## What this package does not do

- The command line tool only downloads shards. It does not run a
  processing pipeline over them, and has no commands to deduplicate, split,
  compress, package, rebuild or check a corpus.
- No language identification model is included: `FastText.identify` only
  counts Thai characters, and `FastText.predict` needs a model object
  supplied by the caller.
- There is no reader for WET shards, no reader for metadata or document
  files, and no writer that pairs text with its metadata; `TextWriter` and
  `MetaWriter` are used separately.