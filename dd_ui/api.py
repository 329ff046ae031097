"""Stable UI API surface."""

from __future__ import annotations

from dd_ui.cli import app, ctx_store, main
from dd_ui.data import interests_catalog, load_collection, load_sample
from dd_ui.flows.selection import items_table, run_demo
from dd_ui.tui.headless import HeadlessSession, HeadlessUI, ScriptedAction
from dd_ui.tui.models import TableModel
from dd_ui.tui.selector_panel import SelectorPanel, SelectorPanelConfig
from dd_ui.tui.selector_screen import SelectorScreen

__all__ = [
    "app",
    "main",
    "ctx_store",
    "HeadlessSession",
    "HeadlessUI",
    "interests_catalog",
    "items_table",
    "load_collection",
    "load_sample",
    "run_demo",
    "ScriptedAction",
    "SelectorPanel",
    "SelectorPanelConfig",
    "SelectorScreen",
    "TableModel",
]
