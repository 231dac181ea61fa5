"""Enclosure viability analysis for zoo staff tooling."""
