from confsite.services.auth import AdminAccountService, AuthService
from confsite.services.ordering import (
    OrderedItemStore,
    OrderingError,
    StoreWriteError,
    UnknownItemError,
    reorder,
    sequential_positions,
)
from confsite.services.collections import OrderedCollectionService
from confsite.services.gallery_service import GalleryService
from confsite.services.schedule_service import DayNotFoundError, ScheduleService
from confsite.services.secretariat_service import SecretariatService
from confsite.services.highlight_service import HighlightService
from confsite.services.document_service import DocumentService
from confsite.services.committee_service import CommitteeService
from confsite.services.country_service import CountryService
from confsite.services.post_service import PostService
from confsite.services.site_content_service import SiteContentService
from confsite.services.csv_transfer import CSVTransferService, TransferDataset
from confsite.services.seed import seed_defaults

__all__ = [
    "AuthService",
    "AdminAccountService",
    # Ordering
    "OrderedItemStore",
    "OrderingError",
    "StoreWriteError",
    "UnknownItemError",
    "reorder",
    "sequential_positions",
    # Collections
    "OrderedCollectionService",
    "GalleryService",
    "ScheduleService",
    "DayNotFoundError",
    "SecretariatService",
    "HighlightService",
    "DocumentService",
    # Other content
    "CommitteeService",
    "CountryService",
    "PostService",
    "SiteContentService",
    "CSVTransferService",
    "TransferDataset",
    "seed_defaults",
]
