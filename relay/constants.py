import os

# Arquivo de configuração (TOML); pode ser sobrescrito via ambiente
CONFIG_FILE = os.getenv("CONFIG_FILE", "config.toml")

DEFAULT_HTTP_PORT = 8080

# Variáveis de ambiente que sobrescrevem chaves do config.toml
ENV_OVERRIDES = {
    "webhook_url": "WEBHOOK_URL",
    "bearer_token": "BEARER_TOKEN",
    "uptime_url": "UPTIME_URL",
    "prod": "PROD",
    "http_port": "HTTP_PORT",
}

# Status do heartbeat no Uptime Kuma (0 = DOWN; qualquer outro valor é tratado como UP)
HEARTBEAT_DOWN = 0

STATUS_COLORS = {
    "up": 65280,
    "down": 16711680,
}

STATUS_LABELS = {
    "up": "Up",
    "down": "Down",
}

UNAUTHORIZED_MESSAGE = "Unauthorized"
MISSING_NAME_MESSAGE = "missing monitor name"
SUCCESS_MESSAGE = "Success"
