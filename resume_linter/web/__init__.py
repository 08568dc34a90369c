"""HTTP surface for the resume linter."""
