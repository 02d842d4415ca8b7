"""Decodificação do webhook enviado pelo Uptime Kuma.

A decodificação é tolerante por campo: chaves desconhecidas são ignoradas e
chaves ausentes (ou null) ficam com o valor zero. Um corpo que não é JSON, ou
um campo declarado com tipo errado, gera PayloadError.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from .constants import MISSING_NAME_MESSAGE


class PayloadError(ValueError):
    pass


# Campos declarados: chave JSON -> (atributo, tipo esperado)
HEARTBEAT_FIELDS = {
    "monitorID": ("monitor_id", int),
    "status": ("status", int),
    "time": ("time", str),
    "msg": ("msg", str),
    "important": ("important", bool),
    "duration": ("duration", int),
}

MONITOR_FIELDS = {
    "id": ("id", int),
    "name": ("name", str),
    "description": ("description", str),
    "url": ("url", str),
    "hostname": ("hostname", str),
    "type": ("type", str),
    "interval": ("interval", int),
}

_TYPE_NAMES = {int: "integer", str: "string", bool: "boolean"}


@dataclass
class Heartbeat:
    monitor_id: int = 0
    status: int = 0
    time: str = ""
    msg: str = ""
    important: bool = False
    duration: int = 0


@dataclass
class Monitor:
    id: int = 0
    name: str = ""
    description: str = ""
    url: str = ""
    hostname: str = ""
    type: str = ""
    interval: int = 0
    # Demais campos de configuração do monitor, sem uso na notificação
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StatusEvent:
    heartbeat: Heartbeat = field(default_factory=Heartbeat)
    monitor: Monitor = field(default_factory=Monitor)
    msg: str = ""


def _matches(value: Any, expected: type) -> bool:
    # bool é subclasse de int em Python; JSON os trata como tipos distintos
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def _reject_constant(name: str):
    raise PayloadError(f"invalid JSON value: {name}")


def _decode_fields(data: Any, declared: Dict[str, tuple], path: str) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise PayloadError(f"cannot decode {type(data).__name__} into object field {path}")

    values = {}
    for key, (attr, expected) in declared.items():
        value = data.get(key)
        if value is None:
            continue
        if not _matches(value, expected):
            raise PayloadError(
                f"cannot decode {json.dumps(value)} into field {path}.{key} of type {_TYPE_NAMES[expected]}"
            )
        values[attr] = value
    return values


def decode_event(raw: Union[bytes, str]) -> StatusEvent:
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except PayloadError:
        raise
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError, UnicodeDecodeError, limite de dígitos de int e aninhamento excessivo
        raise PayloadError(str(exc)) from exc

    if not isinstance(data, dict):
        raise PayloadError(f"cannot decode {type(data).__name__} into webhook payload object")

    heartbeat = Heartbeat(**_decode_fields(data.get("heartbeat"), HEARTBEAT_FIELDS, "heartbeat"))

    monitor_data = data.get("monitor")
    monitor = Monitor(**_decode_fields(monitor_data, MONITOR_FIELDS, "monitor"))
    if monitor_data:
        monitor.extra = {k: v for k, v in monitor_data.items() if k not in MONITOR_FIELDS}

    msg = data.get("msg")
    if msg is not None and not isinstance(msg, str):
        raise PayloadError(f"cannot decode {json.dumps(msg)} into field msg of type string")

    return StatusEvent(heartbeat=heartbeat, monitor=monitor, msg=msg or "")


def validate_event(event: StatusEvent) -> Optional[str]:
    """Retorna a mensagem de erro de validação, ou None se o evento pode ser encaminhado."""
    if not event.monitor.name:
        return MISSING_NAME_MESSAGE
    return None
