"""Page layouts and routes of the web interface."""

from __future__ import annotations

from enum import Enum

from markupsafe import Markup

from cbgui.components import file_card
from cbgui.file_data import FileData

__all__ = ["Route", "navbar", "file_page", "text_page"]

_BTN_ACTIVE_STYLE = "btn-primary pointer-events-none"
_BTN_STYLE = "btn text-xl join-item btn-soft"


class Route(Enum):
    """Top-level pages, keyed by their URL path."""

    FILE = "/file"
    TEXT = "/text"

    @property
    def label(self) -> str:
        return self.name.title()


def navbar(active: Route | None, body: Markup) -> Markup:
    """Wrap ``body`` in the shared navigation bar, highlighting ``active``."""
    links = Markup("").join(
        Markup('<a href="{href}" class="{cls}">{label}</a>').format(
            href=route.value,
            cls=f"{_BTN_STYLE} {_BTN_ACTIVE_STYLE}" if route is active else _BTN_STYLE,
            label=route.label,
        )
        for route in Route
    )
    return Markup(
        '<div class="navbar bg-base-100 shadow-lg justify-center">'
        '<div class="navbar-center join">{links}</div>'
        "</div>{body}"
    ).format(links=links, body=body)


def _section(title: str, slot: str, file: FileData | None) -> Markup:
    return Markup(
        '<div class="border border-base-300 rounded-lg p-4 m-4">'
        '<p class="text-center mb-4">{title}</p>{card}</div>'
    ).format(title=title, card=file_card(slot, file))


def file_page(encrypted: FileData | None, decrypted: FileData | None) -> Markup:
    """Render the page holding the encrypted and decrypted file cards."""
    return (
        Markup('<h1 class="text-4xl font-bold text-center my-8">File Upload and Download Example</h1>')
        + _section("Encrypted File", "encrypted", encrypted)
        + _section("Decrypted File", "decrypted", decrypted)
    )


_MODES = (("ecb", "ECB"), ("cbc", "CBC"), ("ctr", "CTR"))


def text_page() -> Markup:
    """Render the text encryption page."""
    radios = Markup("").join(
        Markup(
            '<input type="radio" name="encryption_mode" id="{id}" '
            'class="radio radio-primary" value="{value}"{checked}>'
            '<label for="{id}" class="label cursor-pointer">{value} Mode</label>'
        ).format(id=ident, value=value, checked=Markup(" checked") if index == 0 else "")
        for index, (ident, value) in enumerate(_MODES)
    )
    return Markup(
        '<h1 class="text-4xl font-bold text-center my-8">Text Encryption</h1>'
        '<p class="text-center mb-4">'
        "Encrypt and decrypt text using AES encryption in different modes.</p>"
        '<div><p class="text-center mb-4">Select an encryption mode and enter text to encrypt.</p>'
        "{radios}</div>"
        '<textarea class="textarea textarea-bordered w-full max-w-lg mx-auto" '
        'placeholder="Enter text to encrypt..." rows="10"></textarea>'
        '<textarea class="textarea textarea-bordered w-full max-w-lg mx-auto mt-4" '
        'placeholder="Encrypted text will appear here..." rows="10"></textarea>'
    ).format(radios=radios)