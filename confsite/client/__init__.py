from confsite.client.api_client import CMSClient, OrderedCollection, RemoteOrderedCollection
from confsite.client.stores import InMemoryOrderedStore, OrderedStore
from confsite.client.synchronizer import OptimisticReorderSynchronizer, SyncState

__all__ = [
    "CMSClient",
    "OrderedCollection",
    "RemoteOrderedCollection",
    "InMemoryOrderedStore",
    "OrderedStore",
    "OptimisticReorderSynchronizer",
    "SyncState",
]
