from __future__ import annotations

from .prime_search_dashboard import make_prime_search_dashboard

__all__ = ["make_prime_search_dashboard"]
