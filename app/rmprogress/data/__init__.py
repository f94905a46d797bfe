"""Bundled data files for rmprogress."""
