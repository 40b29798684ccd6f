"""Service for home page highlight operations."""

from confsite.models import Highlight
from confsite.services.collections import OrderedCollectionService


class HighlightService(OrderedCollectionService[Highlight]):
    """Service for highlight CRUD and ordering."""

    model = Highlight
