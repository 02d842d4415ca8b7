from dataclasses import dataclass

from .constants import HEARTBEAT_DOWN, STATUS_COLORS, STATUS_LABELS
from .payload import StatusEvent


@dataclass(frozen=True)
class DiscordStatus:
    color: int
    label: str


DISCORD_UP = DiscordStatus(color=STATUS_COLORS["up"], label=STATUS_LABELS["up"])
DISCORD_DOWN = DiscordStatus(color=STATUS_COLORS["down"], label=STATUS_LABELS["down"])


def resolve_status(heartbeat_status: int) -> DiscordStatus:
    # PENDING/MAINTENANCE e demais códigos não-zero são exibidos como Up
    if heartbeat_status == HEARTBEAT_DOWN:
        return DISCORD_DOWN
    return DISCORD_UP


def build_status_embed(event: StatusEvent, uptime_url: str) -> dict:
    status = resolve_status(event.heartbeat.status)
    return {
        "type": "rich",
        "title": f"{event.monitor.name} is {status.label}",
        "description": event.monitor.description,
        "color": status.color,
        "url": uptime_url,
    }


def build_discord_payload(event: StatusEvent, uptime_url: str) -> dict:
    return {
        "content": "",
        "embeds": [build_status_embed(event, uptime_url)],
    }
