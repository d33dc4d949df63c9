"""ID Generation System.

ULID-based identifiers for pages and render passes.

Features:
- ULIDs: Lexicographically sortable, timestamp-based
- Type-safe: NewType wrappers for different ID categories
- Prefixed: Type-specific prefixes for debugging (page_*, pass_*)
"""

from typing import NewType
from ulid import ULID

# ============================================================================
# Type-Safe ID Wrappers
# ============================================================================

PageID = NewType("PageID", str)
"""Page instance identifier"""

RenderPassID = NewType("RenderPassID", str)
"""Render pass identifier"""

# ============================================================================
# ID Prefixes (for debugging and type identification)
# ============================================================================


class Prefix:
    """ID prefix constants."""

    PAGE = "page"
    RENDER_PASS = "pass"


# ============================================================================
# ULID Generator
# ============================================================================


class Generator:
    """ULID generator."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"


# Singleton instance
_generator = Generator()

# ============================================================================
# Typed ID Generators
# ============================================================================


def new_page_id() -> PageID:
    """Generate new page ID."""
    return PageID(_generator.generate_with_prefix(Prefix.PAGE))


def new_render_pass_id() -> RenderPassID:
    """Generate new render pass ID."""
    return RenderPassID(_generator.generate_with_prefix(Prefix.RENDER_PASS))


__all__ = [
    "PageID",
    "RenderPassID",
    "Prefix",
    "Generator",
    "new_page_id",
    "new_render_pass_id",
]
