"""Terminal front ends for the selection engine.

The prompt_toolkit screens only read selector outputs; the headless UI
replays scripted actions for CI and tests.
"""
