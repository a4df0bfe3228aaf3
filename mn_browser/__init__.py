"""
Top-level package for the metabolic network browser.

This package exposes the core architecture (model, state, views, UI adapters).
Most code should import from submodules such as:
    mn_browser.core
    mn_browser.views
    mn_browser.ui
"""

__all__: list[str] = []
