# niiebla

Building blocks for the binary formats that Nintendo consoles use to ship titles:

- `niiebla.title_id`: `TitleId`, the 64-bit title identifier. It can be shown as hex, with its
  lower half as ASCII text, or by its well-known Wii system name.
- `niiebla.title_metadata`: the title metadata (TMD) error classes, the `Platform` and
  `WiiRegion` enums, and the platform blocks `WiiPlatformData` and `Console3dsPlatformData`.
- `niiebla.title_contents`: content entries (`TitleMetadataContentEntry`, `ContentEntryKind`),
  the version 1 extension (`TitleMetadataV1`, `TitleMetadataV1ContentEntriesGroup`) and
  `title_metadata_size`.
- `niiebla.content_selector`: `ContentSelector`, which picks a content entry by physical
  position, by ID, by index, or as the first or last entry.
- `niiebla.aes_stream`: `AesCbcStream`, which decrypts AES-128-CBC data at any position of a
  seekable stream and encrypts whole buffers.
- Stream helpers:
  - `niiebla.view`: `View` and `RecallView`, which are bounded windows over a stream.
  - `niiebla.stream_pin`: `StreamPin`, which seeks and aligns relative to a pinned position.
  - `niiebla.binio`: alignment, exact reads, booleans, NUL-terminated strings and zero padding.
- `niiebla.cli_logging`: `setup_logging_for_cli()`, which installs a stderr log handler
  without timestamps.

## Installation

```
pip install niiebla
```

To also install the test dependencies:

```
pip install "niiebla[test]"
```

## Usage

### Title IDs

```python
from niiebla.title_id import TitleId

title_id = TitleId(5350613616540337985)
print(title_id)                      # 4a4132bc-48414741
print(f"{title_id:#}")               # 4A4132BC-48414741
print(title_id.display_ascii())      # 4a4132bc-HAGA

ios = TitleId.from_halves(1, 58)
print(ios.display_wii_platform())    # IOS58 (Wii)

ios.lower_half = 2
print(ios.display_wii_platform())    # System Menu
```

`TitleId.dump(stream)` writes the value as a big-endian 64-bit integer.

### Content entries and selectors

```python
import io
from niiebla.title_contents import ContentEntryKind, TitleMetadataContentEntry
from niiebla.content_selector import ContentSelector

entries = [
    TitleMetadataContentEntry(id=0x10, index=0, kind=ContentEntryKind.NORMAL, size=1024, hash=bytes(20)),
    TitleMetadataContentEntry(id=0x20, index=1, kind=ContentEntryKind.SHARED, size=64, hash=bytes(20)),
]

assert ContentSelector.with_id(0x20).physical_position(entries) == 1
assert ContentSelector.last().index(entries) == 1

buffer = io.BytesIO()
entries[0].dump(buffer)
buffer.seek(0)
assert TitleMetadataContentEntry.parse(buffer, version_1=False) == entries[0]
```

A selection that matches nothing raises `ContentNotFoundError`. An unknown content kind,
platform, Wii region or format version raises the matching `TitleMetadataError` subclass.

### Bounded views

```python
import io
from niiebla.view import View, RecallView

stream = io.BytesIO(bytes(range(1, 11)))
stream.seek(4)
view = View(stream, 2)
assert view.read(5) == bytes([5, 6])

stream.seek(0)
with RecallView(stream, 5) as recall:
    recall.read(5)
assert stream.tell() == 0
```

When the `with` block ends, `RecallView` puts the wrapped stream back at the position it had
when the view was created.

### Encrypted streams

```python
from niiebla.aes_stream import AesCbcStream

crypto = AesCbcStream(encrypted_stream, key, iv)  # 16-byte key and IV
crypto.seek(32)
plaintext = crypto.read(16)
```

`write` takes a buffer that is a whole number of 16-byte blocks. It encrypts the buffer
starting from the initial IV.

## What the package does not do

The package has no parser or writer for a complete title metadata file, tickets, certificate
chains or WAD archives. It also does not ship the console's common keys. To use
`AesCbcStream`, you must supply the key and the IV yourself. It has no command-line program.

## Running the tests

```
pytest
```