"""Configuration loading and defaults for skiptools.

Modules:
- loader: ToolCatalogLoader, reading tool catalogs and message histories
  from YAML/JSON files
- defaults: Constants for block parsing and keyword matching
"""
