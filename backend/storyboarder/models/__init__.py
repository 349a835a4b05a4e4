"""ORM model package — registers all models with Base.metadata."""

from storyboarder.models.project import ComicProject
from storyboarder.models.page import ComicPage
from storyboarder.models.panel import ComicPanel

__all__ = [
    "ComicProject",
    "ComicPage",
    "ComicPanel",
]
