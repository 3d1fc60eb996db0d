"""HTTP surface for the sprint planning engine."""
