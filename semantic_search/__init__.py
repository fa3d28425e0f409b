"""Semantic retrieval engine for grounding language model prompts."""

__version__ = "0.1.0"
