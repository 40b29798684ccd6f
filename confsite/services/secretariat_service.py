"""Service for secretariat member operations."""

from confsite.models import SecretariatMember
from confsite.services.collections import OrderedCollectionService


class SecretariatService(OrderedCollectionService[SecretariatMember]):
    """Service for secretariat CRUD and ordering."""

    model = SecretariatMember
