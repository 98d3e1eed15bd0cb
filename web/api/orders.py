# web/api/orders.py
# Sipariş koleksiyonu: GET /orders -> tüm kayıtlar, POST /orders -> yeni kayıt (201).

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from tp_rest_api.collection_service import CollectionService
from tp_rest_api.record_store import RecordStoreError, UnserializableRecordError
from web.services.collections import get_orders_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/orders",
    summary="Tüm siparişleri listele",
    responses={200: {"description": "Sipariş kayıtları (eklenme sırasıyla)"}},
)
def list_orders(service: CollectionService = Depends(get_orders_service)):
    """data/orders.json içeriği. Dosya yoksa veya bozuksa boş liste döner."""
    return service.list_all()


@router.post(
    "/orders",
    status_code=201,
    summary="Yeni sipariş ekle",
    responses={
        201: {"description": "Sipariş kaydedildi; sunucu tarafından üretilen id ile döner"},
        422: {"description": "Gövde geçerli bir JSON nesnesi değil (NaN/Infinity dahil)"},
        500: {"description": "Sipariş dosyası yazılamadı"},
    },
)
def create_order(
    fields: Optional[Dict[str, Any]] = Body(None),
    service: CollectionService = Depends(get_orders_service),
):
    """
    Gövdedeki alanlar doğrulanmadan saklanır. Gövdede id varsa yok sayılır;
    id her zaman sunucu tarafından üretilir.
    """
    try:
        return service.create(fields or {})
    except UnserializableRecordError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RecordStoreError as e:
        logger.exception("Order could not be saved")
        raise HTTPException(status_code=500, detail=str(e))
