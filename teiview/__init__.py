"""Semantic document model for TEI letter transcriptions."""
