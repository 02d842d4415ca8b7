import logging
import sys

from relay.config import ConfigError, load_config
from relay.controller import create_app


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config()
    except ConfigError as exc:
        sys.exit(f"Can't load config file: {exc}")

    if not config.prod:
        logging.getLogger().setLevel(logging.DEBUG)

    app = create_app(config)
    try:
        # prod só escolhe o nível de log; o debugger interativo do Werkzeug fica sempre desligado
        app.run(host='0.0.0.0', port=config.http_port, debug=False)
    except OSError as exc:
        sys.exit(f"Can't start HTTP server: {exc}")


if __name__ == '__main__':
    main()
