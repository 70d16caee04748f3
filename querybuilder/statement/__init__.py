"""Statement builders, literal formatting and result helpers."""
