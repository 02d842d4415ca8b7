import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from typing import Dict, List, Mapping, Optional

from .constants import CONFIG_FILE, DEFAULT_HTTP_PORT, ENV_OVERRIDES

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Config:
    webhook_url: str = ""
    bearer_token: str = ""
    uptime_url: str = ""
    prod: bool = False
    http_port: int = DEFAULT_HTTP_PORT

    def missing(self, *names: str) -> List[str]:
        """Lista as chaves obrigatórias que estão vazias."""
        return [name for name in names if not getattr(self, name)]


def _to_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _to_port(value) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"http_port inválido: {value!r}")
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"http_port inválido: {value!r}") from exc
    if not 0 < port < 65536:
        raise ConfigError(f"http_port fora do intervalo: {port}")
    return port


def config_from_mapping(data: Mapping) -> Config:
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.debug(f"Chaves ignoradas no config: {unknown}")

    values: Dict[str, object] = {}
    for key in ("webhook_url", "bearer_token", "uptime_url"):
        if key in data and data[key] is not None:
            values[key] = str(data[key])
    if "prod" in data:
        values["prod"] = _to_bool(data["prod"])
    if "http_port" in data:
        values["http_port"] = _to_port(data["http_port"])
    return Config(**values)


def apply_env_overrides(config: Config, environ: Optional[Mapping[str, str]] = None) -> Config:
    environ = os.environ if environ is None else environ
    overrides: Dict[str, object] = {}
    for key, env_name in ENV_OVERRIDES.items():
        raw = environ.get(env_name)
        if raw is None:
            continue
        if key == "prod":
            overrides[key] = _to_bool(raw)
        elif key == "http_port":
            overrides[key] = _to_port(raw)
        else:
            overrides[key] = raw
    if overrides:
        logger.debug(f"Overrides de ambiente aplicados: {sorted(overrides)}")
    return replace(config, **overrides)


def load_config(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Lê o config.toml uma única vez na inicialização.
    Arquivo ausente ou TOML inválido é fatal; chaves vazias só são cobradas no primeiro uso.
    """
    path = path or CONFIG_FILE
    try:
        with open(path, 'rb') as fp:
            data = tomllib.load(fp)
    except FileNotFoundError as exc:
        raise ConfigError(f"Arquivo de configuração não encontrado: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Falha ao ler {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"TOML inválido em {path}: {exc}") from exc

    config = apply_env_overrides(config_from_mapping(data), environ)
    logger.info(f"Configuração carregada de {path} (prod={config.prod}, porta={config.http_port})")
    return config
