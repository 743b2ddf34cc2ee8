"""
Archive layout definitions for yt-takeout-ingest.

Contains one YAML file per known Takeout localization. The loader module
(layout_registry.py in the parent package) reads these files at runtime.
"""
