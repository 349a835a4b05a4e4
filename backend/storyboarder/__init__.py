"""Comic storyboarding backend: projects, pages and panels per signed-in user."""

__version__ = "0.1.0"
