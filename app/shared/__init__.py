"""
Framework-agnostic helpers shared by the UI layer.

- helpers.py: HTML escaping, date/score formatting
"""

from app.shared.helpers import escape_for_html, format_day, sentiment_icon
