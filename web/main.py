# web/main.py
# ---------------------------------------------------------------------------
# Web arayüzünün giriş noktası.
#
# İçermeli:
#   - Uygulama örneği (FastAPI)
#   - Ana rotaların mount edilmesi
#   - Başlangıçta veri dizininin hazırlanması
#
# İçermemeli:
#   - Kayıt okuma/yazma mantığı (tp_rest_api/ tarafında kalmalı)
#   - Sunucunun başlatılması (web/__main__.py)
# ---------------------------------------------------------------------------

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from web.api.orders import router as orders_router
from web.api.products import router as products_router
from web.services.collections import STORE, all_services

logger = logging.getLogger(__name__)


def _ensure_data_dir():
    STORE.ensure_data_dir()
    for name, service in all_services().items():
        logger.info("Collection %s: %d record(s) in %s", name, service.count(), STORE.path_for(name))


@asynccontextmanager
async def lifespan(app: FastAPI):
    _ensure_data_dir()
    yield


app = FastAPI(title="TP REST API", lifespan=lifespan)

# GET/POST /products
app.include_router(products_router, tags=["products"])
# GET/POST /orders
app.include_router(orders_router, tags=["orders"])
