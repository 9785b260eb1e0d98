"""Snippetbox — credential and snippet persistence backend."""
