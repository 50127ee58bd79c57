"""Lets pytest import mediawiki_api from a source checkout."""
