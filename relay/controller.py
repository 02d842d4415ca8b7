import logging

from flask import Flask, request

from .constants import UNAUTHORIZED_MESSAGE
from .payload import PayloadError, decode_event, validate_event
from .services import forward_event, send_discord_payload

logger = logging.getLogger(__name__)


def authorize(header, token):
    # Comparação exata de string, sem tempo constante
    return header == f"Bearer {token}"


def create_app(config, sender=send_discord_payload):
    app = Flask(__name__)

    @app.route('/webhook', methods=['POST'])
    def webhook():
        missing = config.missing('bearer_token')
        if missing:
            logger.error(f"Configuração ausente: {', '.join(missing)}")
            return {'error': f"{missing[0]} is not configured"}, 500

        if not authorize(request.headers.get('Authorization', ''), config.bearer_token):
            logger.warning(f"Requisição não autorizada de {request.remote_addr}")
            return {'error': UNAUTHORIZED_MESSAGE}, 401

        try:
            event = decode_event(request.get_data())
        except PayloadError as exc:
            logger.info(f"Payload inválido: {exc}")
            return {'error': str(exc)}, 400

        error = validate_event(event)
        if error:
            logger.info(f"Payload rejeitado: {error}")
            return {'error': error}, 400

        logger.debug(
            f"Heartbeat recebido: monitor={event.monitor.name!r} status={event.heartbeat.status} msg={event.heartbeat.msg!r}"
        )
        return forward_event(event, config, sender=sender)

    return app
