# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env`. This file should contain only safe overrides.
"""

# Example: start in grid layout
# VIEW_MODE = "grid"

# Example: keep the store somewhere else (storage.json is created inside it)
# DATA_DIR = "~/.taskboard"
