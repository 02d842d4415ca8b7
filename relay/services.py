import logging

import requests

from .constants import SUCCESS_MESSAGE
from .formatters import build_discord_payload

logger = logging.getLogger(__name__)


class DeliveryError(RuntimeError):
    pass


def send_discord_payload(webhook_url, content=None, embeds=None):
    """
    Envia uma única requisição ao webhook do Discord, sem retry.
    Só falhas de transporte levantam DeliveryError; o status HTTP do destino é apenas logado.
    """
    payload = {}
    if content is not None:
        payload["content"] = content
    if embeds is not None:
        payload["embeds"] = embeds

    try:
        resp = requests.post(
            webhook_url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
    except requests.RequestException as exc:
        logger.error(f"Falha ao enviar notificação ao Discord: {exc}")
        raise DeliveryError(str(exc)) from exc

    logger.debug(f"Discord response: {resp.status_code}")
    if resp.status_code >= 400:
        logger.warning(f"Discord respondeu {resp.status_code}: {resp.text[:500]}")
    return resp


def forward_event(event, config, sender=send_discord_payload):
    """Encaminha o evento ao Discord e traduz o resultado em (corpo, status HTTP)."""
    missing = config.missing('webhook_url')
    if missing:
        logger.error(f"Configuração ausente: {', '.join(missing)}")
        return {'error': f"{missing[0]} is not configured"}, 500

    payload = build_discord_payload(event, config.uptime_url)
    try:
        sender(config.webhook_url, content=payload["content"], embeds=payload["embeds"])
    except DeliveryError as exc:
        return {'error': str(exc)}, 500

    logger.info(f"Notificação enviada: {payload['embeds'][0]['title']}")
    return {'message': SUCCESS_MESSAGE}, 200
