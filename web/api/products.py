# web/api/products.py
# Ürün koleksiyonu: GET /products -> tüm kayıtlar, POST /products -> yeni kayıt (201).

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from tp_rest_api.collection_service import CollectionService
from tp_rest_api.record_store import RecordStoreError, UnserializableRecordError
from web.services.collections import get_products_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/products",
    summary="Tüm ürünleri listele",
    responses={200: {"description": "Ürün kayıtları (eklenme sırasıyla)"}},
)
def list_products(service: CollectionService = Depends(get_products_service)):
    """data/products.json içeriği. Dosya yoksa veya bozuksa boş liste döner."""
    return service.list_all()


@router.post(
    "/products",
    status_code=201,
    summary="Yeni ürün ekle",
    responses={
        201: {"description": "Ürün kaydedildi; sunucu tarafından üretilen id ile döner"},
        422: {"description": "Gövde geçerli bir JSON nesnesi değil (NaN/Infinity dahil)"},
        500: {"description": "Ürün dosyası yazılamadı"},
    },
)
def create_product(
    fields: Optional[Dict[str, Any]] = Body(None),
    service: CollectionService = Depends(get_products_service),
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
        logger.exception("Product could not be saved")
        raise HTTPException(status_code=500, detail=str(e))
