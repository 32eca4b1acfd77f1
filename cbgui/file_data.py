"""In-memory file contents with text and hex renderings."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["FileData"]


@dataclass
class FileData:
    """A named blob of bytes, as picked by the user or offered for download."""

    name: str
    contents: bytes

    def bin_as_hex_string(self) -> str:
        """Return the contents as space-separated ``0xNN`` bytes."""
        return " ".join(f"0x{byte:02x}" for byte in self.contents)

    def content_as_string(self) -> str:
        """Decode the contents as UTF-8, replacing invalid sequences."""
        return bytes(self.contents).decode("utf-8", errors="replace")