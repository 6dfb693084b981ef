"""Fretboard diagram model for the five-string banjo in open G tuning."""
