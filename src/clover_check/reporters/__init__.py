"""Output reporters for coverage check results."""
