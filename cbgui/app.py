"""Flask application serving the file and text pages."""

from __future__ import annotations

import argparse
import io
import threading

from flask import Flask, abort, redirect, request, send_file, url_for
from markupsafe import Markup

from cbgui.file_data import FileData
from cbgui.views import Route, file_page, navbar, text_page

__all__ = ["FileStore", "create_app", "main"]

SLOTS = ("encrypted", "decrypted")


class FileStore:
    """Thread-safe holder of the file currently in each slot."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._files: dict[str, FileData | None] = dict.fromkeys(SLOTS)

    def get(self, slot: str) -> FileData | None:
        """Return the file in ``slot``; unknown slots raise ``KeyError``."""
        with self._lock:
            return self._files[slot]

    def set(self, slot: str, file: FileData | None) -> None:
        """Replace the file in ``slot``; unknown slots raise ``KeyError``."""
        with self._lock:
            if slot not in self._files:
                raise KeyError(slot)
            self._files[slot] = file


def _document(body: Markup) -> str:
    return str(
        Markup(
            "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
            '<link rel="icon" href="/assets/favicon.ico">'
            '<link rel="stylesheet" href="/assets/tailwind.css">'
            "</head><body>{body}</body></html>"
        ).format(body=body)
    )


def create_app(store: FileStore | None = None) -> Flask:
    """Build the web application backed by ``store``."""
    files = store if store is not None else FileStore()
    app = Flask(__name__)

    def _check_slot(slot: str) -> None:
        if slot not in SLOTS:
            abort(404)

    @app.get("/")
    def index():
        return redirect(url_for("file_view"))

    @app.get(Route.FILE.value)
    def file_view():
        page = file_page(files.get("encrypted"), files.get("decrypted"))
        return _document(navbar(Route.FILE, page))

    @app.get(Route.TEXT.value)
    def text_view():
        return _document(navbar(Route.TEXT, text_page()))

    @app.post("/file/<slot>/upload")
    def upload(slot: str):
        _check_slot(slot)
        picked = request.files.get("file")
        if picked is not None and picked.filename:
            files.set(slot, FileData(picked.filename, picked.read()))
        return redirect(url_for("file_view"))

    @app.get("/file/<slot>/download")
    def download(slot: str):
        _check_slot(slot)
        file = files.get(slot)
        if file is None:
            abort(404)
        return send_file(
            io.BytesIO(file.contents),
            mimetype="application/octet-stream",
            as_attachment=True,
            download_name=file.name,
        )

    return app


def main(argv: list[str] | None = None) -> None:
    """Run the development server."""
    parser = argparse.ArgumentParser(prog="cbgui", description="File and text encryption UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()