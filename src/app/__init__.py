"""App: orquestração, casos de uso e infraestrutura do Flow Relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de requisição e categorias
- use_cases/: casos de uso (inputs/outputs, sem IO direto)
- services/: classificação, descriptografia e encaminhamento
- infra/: implementações concretas de IO (crypto, http)
- protocols/: contratos/interfaces
- observability/: correlation_id por requisição

Padrão: app executa; api adapta; config configura.
"""
