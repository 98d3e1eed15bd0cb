# web/services/collections.py
# Koleksiyon servislerinin (products, orders) tek noktadan kurulması.
# Route'lar servislere FastAPI dependency'leri üzerinden erişir; testler
# app.dependency_overrides ile geçici dizine bakan servisler verebilir.

from tp_rest_api.collection_service import ORDERS, PRODUCTS, CollectionService, build_services
from tp_rest_api.config import DATA_DIR
from tp_rest_api.record_store import RecordStore

STORE = RecordStore(DATA_DIR)
_SERVICES = build_services(STORE)


def get_products_service() -> CollectionService:
    return _SERVICES[PRODUCTS]


def get_orders_service() -> CollectionService:
    return _SERVICES[ORDERS]


def all_services() -> dict:
    """Koleksiyon adı -> servis eşlemesi (başlangıç logu için)."""
    return dict(_SERVICES)
