"""Batch 7-Zip archiving and verification."""
