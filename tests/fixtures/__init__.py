"""Test fixtures for rustcprobe tests.

Fixtures are organized by type:

- banners: Real-world ``rustc --version`` output and fake process results

Import fixtures in your tests using:
    from tests.fixtures.banners import rustc_banners
"""

__all__ = [
    "banners",
]
