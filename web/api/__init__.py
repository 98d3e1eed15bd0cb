# web/api/
# ---------------------------------------------------------------------------
# HTTP API katmanı — endpoint'ler, route'lar, request/response işleme.
#
# İçermeli:
#   - REST route tanımları (/products, /orders)
#   - Services çağrıları (iş mantığı burada değil)
#   - Depolama hatalarının HTTP durum kodlarına çevrilmesi
#
# İçermemeli:
#   - Dosya okuma/yazma, id üretimi (tp_rest_api'ye bırak)
# ---------------------------------------------------------------------------
