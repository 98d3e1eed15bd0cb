# web/services/
# ---------------------------------------------------------------------------
# İş mantığı katmanı — tp_rest_api ile köprü.
#
# İçermeli:
#   - tp_rest_api servislerinin kurulması ve route'lara verilmesi
#   - Depolama dizini gibi çalışma zamanı bağlamı
#
# İçermemeli:
#   - HTTP/route detayları (api/ tarafında)
#   - Kayıt okuma/yazma mantığı (tp_rest_api/record_store.py'de kalmalı)
# ---------------------------------------------------------------------------
