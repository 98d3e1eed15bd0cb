# web/__main__.py
# Sunucuyu başlatır: python -m web (veya tp-rest-api komutu).
# Port sabittir (3000); ortam değişkeni ya da CLI bayrağı okunmaz.
# Başlangıç satırı soket bağlandıktan sonra yazılır; port doluysa uvicorn
# hatayı loglayıp süreci sonlandırır.

import logging
import sys

import uvicorn

from tp_rest_api.config import HOST, LOG_FORMAT, PORT

logger = logging.getLogger("web")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stdout)
    from web.main import app

    config = uvicorn.Config(app, host=HOST, port=PORT, log_config=None)
    server = uvicorn.Server(config)
    sock = config.bind_socket()
    logger.info("✅ Server running on http://localhost:%d", PORT)
    server.run(sockets=[sock])


if __name__ == "__main__":
    main()
