"""Data ingestion layer."""
