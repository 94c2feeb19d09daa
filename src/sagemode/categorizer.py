"""Keyword-based classification of application names."""

from __future__ import annotations

from .models import Category

# Evaluated top to bottom; the first category with a matching keyword wins.
CATEGORY_KEYWORDS: list[tuple[Category, frozenset[str]]] = [
    (
        Category.CODE,
        frozenset(
            {
                "code",
                "visual studio",
                "pycharm",
                "intellij",
                "webstorm",
                "android studio",
                "sublime",
                "vim",
                "emacs",
                "terminal",
                "iterm",
                "warp",
                "cursor",
                "github",
                "powershell",
            }
        ),
    ),
    (
        Category.MEETINGS,
        frozenset(
            {
                "zoom",
                "teams",
                "meet",
                "webex",
                "skype",
                "facetime",
                "slack",
                "discord",
            }
        ),
    ),
    (
        Category.EXPLORE,
        frozenset(
            {
                "chrome",
                "firefox",
                "safari",
                "edge",
                "brave",
                "opera",
                "browser",
            }
        ),
    ),
    (
        Category.PRODUCTIVITY,
        frozenset(
            {
                "notion",
                "obsidian",
                "microsoft word",
                "winword",
                "excel",
                "powerpoint",
                "keynote",
                "numbers",
                "pages",
                "docs",
                "sheets",
                "outlook",
                "mail",
                "calendar",
                "todoist",
                "figma",
                "notes",
            }
        ),
    ),
]


def categorize(app_name: str) -> Category:
    lowered = app_name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return Category.OTHER
