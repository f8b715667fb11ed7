from __future__ import annotations

import platform


def _default_font_family() -> str:
    if platform.system().lower().startswith("win"):
        return "Segoe UI"
    if platform.system().lower().startswith("darwin"):
        return "San Francisco"
    return "Inter"


THEME_TOKENS: dict[str, dict] = {
    "Night Sky": {
        "meta": {"name": "Night Sky", "mode": "dark"},
        "colors": {
            "bg": "#000000",
            "surface": "#0b1220",
            "text": "#ffffff",
            "textMuted": "#cbd5f5",
            "border": "#334155",
            "accent": "#fbbf24",
        },
        "font": {"family": _default_font_family(), "baseSize": 10, "titleSize": 14},
    },
    "Classroom Light": {
        "meta": {"name": "Classroom Light", "mode": "light"},
        "colors": {
            "bg": "#f5f7fb",
            "surface": "#ffffff",
            "text": "#0f172a",
            "textMuted": "#4b5563",
            "border": "#cbd5e1",
            "accent": "#2563eb",
        },
        "font": {"family": _default_font_family(), "baseSize": 10, "titleSize": 14},
    },
}

DEFAULT_THEME = "Night Sky"


def get_theme_tokens(name: str) -> dict:
    return THEME_TOKENS.get(name, THEME_TOKENS[DEFAULT_THEME])


def stylesheet_for(tokens: dict) -> str:
    colors = tokens.get("colors", {})
    font = tokens.get("font", {})
    return (
        f"QWidget {{ background: {colors.get('surface', '#0b1220')}; color: {colors.get('text', '#ffffff')};"
        f" font-family: '{font.get('family', 'Inter')}'; font-size: {font.get('baseSize', 10)}pt; }}"
        f"QGroupBox {{ border: 1px solid {colors.get('border', '#334155')}; border-radius: 6px; margin-top: 12px; }}"
        f"QGroupBox::title {{ subcontrol-origin: margin; left: 8px; color: {colors.get('textMuted', '#cbd5f5')}; }}"
        f"QPushButton:hover {{ border: 1px solid {colors.get('accent', '#fbbf24')}; }}"
    )
