"""
Prefect flows.

Flows:
- post: pick a species, resolve a verified photo, render text, post to Bluesky

Usage (local):
    python -m macaulay_bot.flows.post

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m macaulay_bot.flows.post

In GitHub Actions:
    pip install -e .
    macaulay-bot post --mammals
"""
