"""Bounded contexts of the resume-to-LaTeX pipeline."""
