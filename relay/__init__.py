"""Pacote do relay de webhooks Uptime Kuma -> Discord.

Este pacote contém:
- constants: cores, rótulos e padrões de configuração
- config: carregamento do config.toml com overrides de ambiente
- payload: decodificação e validação do webhook do Uptime Kuma
- formatters: mapeamento de status e montagem do embed
- services: integração com serviços externos (Discord)
- controller: criação do Flask app e endpoint /webhook
"""
