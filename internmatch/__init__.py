"""Internmatch scoring and canonicalization engine."""
