# cbgui

A small web interface for working with files and text. It runs as a local web
server built with Flask and gives you two pages:

- **File** (`/file`): two cards, one for an encrypted file and one for a
  decrypted file. On each card you can upload a file and download it again.
  Once a file is uploaded, the card shows its name, its size in bytes, its
  contents as text (invalid UTF-8 becomes the replacement character) and a hex
  view of every byte, such as `0x48 0x69`. The download button is disabled
  while a card holds no file.
- **Text** (`/text`): a form where you pick an encryption mode (ECB, CBC or
  CTR, with ECB selected first) and enter text, next to a second text area for
  the result.

Opening `/` redirects to the File page. A navigation bar at the top switches
between the two pages and highlights the current one.

## Installation

```
pip install .
```

## Running

```
cbgui
```

This starts the Flask development server on `127.0.0.1:8080`. Options:

- `--host HOST`: address to listen on (default `127.0.0.1`)
- `--port PORT`: port to listen on (default `8080`)
- `--debug`: run Flask in debug mode

Then open the address in your browser.

## Using it from Python

`cbgui.app.create_app` builds the Flask application. It takes an optional
`FileStore`, which holds one file per slot; the slots are `"encrypted"` and
`"decrypted"`. Using any other slot with `FileStore.get` or `FileStore.set`
raises `KeyError`.

```python
from cbgui.app import FileStore, create_app
from cbgui.file_data import FileData

store = FileStore()
store.set("encrypted", FileData("example.bin", b"\x00\xff"))
app = create_app(store)
```

The app serves these routes:

- `GET /` redirects to `/file`
- `GET /file` and `GET /text` render the pages
- `POST /file/<slot>/upload` stores the uploaded form field `file` in the slot
- `GET /file/<slot>/download` sends the slot's file as an attachment, or 404
  if the slot is empty or unknown

`FileData` holds a file's name and its bytes:

```python
data = FileData("hello.txt", b"Hi")
data.bin_as_hex_string()   # '0x48 0x69'
data.content_as_string()   # 'Hi'
```

The HTML fragments are available on their own: `cbgui.components.file_details`
and `cbgui.components.file_card` render the file cards, and `cbgui.views`
provides `Route`, `navbar`, `file_page` and `text_page`.

## What it does not do

- Nothing is encrypted or decrypted. The Text page is a form only: it is not
  submitted anywhere and the result area is never filled in. The two file
  slots are just named places to upload and download files; their contents
  are not transformed.
- Files are kept in memory only and are lost when the server stops.
- The page links to `/assets/favicon.ico` and `/assets/tailwind.css`, but the
  package does not ship or serve these files, so the pages appear unstyled.

## Tests

```
pip install .[test]
pytest
```