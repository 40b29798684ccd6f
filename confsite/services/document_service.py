"""Service for downloadable document operations."""

from confsite.models import DownloadableDocument
from confsite.services.collections import OrderedCollectionService


class DocumentService(OrderedCollectionService[DownloadableDocument]):
    """Service for document CRUD and ordering."""

    model = DownloadableDocument
