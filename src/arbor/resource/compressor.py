"""JavaScript compression for served scripts."""

from typing import Protocol


class JavaScriptCompressor(Protocol):
    def compress(self, source: str) -> str:
        ...


class WhitespaceJavaScriptCompressor:
    """Strips indentation, blank lines and whole-line ``//`` comments."""

    def compress(self, source: str) -> str:
        lines = []
        for line in source.splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("//"):
                continue
            lines.append(stripped)
        return "\n".join(lines)


__all__ = ["JavaScriptCompressor", "WhitespaceJavaScriptCompressor"]
