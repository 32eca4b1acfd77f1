"""Reusable HTML fragments for showing and transferring files."""

from __future__ import annotations

from markupsafe import Markup

from cbgui.file_data import FileData

__all__ = ["file_details", "file_card"]

_DETAILS = Markup(
    '<div class="card card-border bg-base-300 m-4 max-w-full md:max-w-2xl">'
    '<div class="card-body p-4">'
    '<span class="card-title text-primary-content flex justify-between items-center">'
    "{name}"
    '<span class="text-xs text-gray-500">{size} bytes</span>'
    "</span>"
    '<div class="mt-2">'
    '<label class="font-semibold text-sm">Text content:</label>'
    '<div class="bg-base-200 rounded-md p-2 mt-1 max-h-60 overflow-y-auto">'
    '<pre class="text-wrap text-secondary whitespace-pre-wrap">{text}</pre>'
    "</div>"
    "</div>"
    '<details class="collapse collapse-arrow bg-base-100 border-base-300 border">'
    '<summary class="collapse-title font-semibold">Hex View</summary>'
    '<div class="bg-base-200 rounded-md p-2 mt-1 max-h-60 overflow-y-auto">'
    '<pre class="text-wrap text-accent break-all">{hex}</pre>'
    "</div>"
    "</details>"
    "</div>"
    "</div>"
)

_CARD = Markup(
    "<div>{details}</div>"
    '<form method="post" action="/file/{slot}/upload" enctype="multipart/form-data" class="inline">'
    '<input type="file" name="file" class="file-input ml-4">'
    '<button type="submit" class="btn btn-secondary ml-4">Upload File</button>'
    "</form>"
    '<form method="get" action="/file/{slot}/download" class="inline">'
    '<button type="submit" class="btn btn-accent ml-4"{disabled}>Download File</button>'
    "</form>"
)


def file_details(file: FileData) -> Markup:
    """Render a card with the file's name, size, text and hex views."""
    return _DETAILS.format(
        name=file.name,
        size=len(file.contents),
        text=file.content_as_string(),
        hex=file.bin_as_hex_string(),
    )


def file_card(slot: str, file: FileData | None) -> Markup:
    """Render upload and download controls for one file slot."""
    details = file_details(file) if file is not None else Markup("")
    disabled = Markup(" disabled") if file is None else Markup("")
    return _CARD.format(details=details, slot=slot, disabled=disabled)