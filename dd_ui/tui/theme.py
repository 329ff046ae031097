from __future__ import annotations

from typing import Mapping

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}

# Arrow next to the search box: "-" hides the list, "+" shows it.
LIST_OPEN_ARROW = "-"
LIST_CLOSED_ARROW = "+"
DISMISS_MARK = "×"


def panel_title(text: str) -> str:
    return f"[{RICH_ACCENT_BOLD}]{text}[/{RICH_ACCENT_BOLD}]"


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)


def prompt_toolkit_selector_style() -> Mapping[str, str]:
    return {
        "cursor": "bg:#0000aa fg:white bold",
        "checked": "fg:#00ff00 bold",
        "separator": "fg:#0000aa",
        "frame.border": "fg:#0000aa",
        "frame.label": "fg:#0000aa bold",
        "search": "bg:#eeeeee fg:#000000",
        "chip": "bg:#005500 fg:white",
        "disabled": "fg:#aa0000",
        "hint": "fg:#888888 italic",
        "title": "bold",
    }
