"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests do endpoint de Flow
- Normalizar o corpo para InboundRequest
- Aplicar os contratos de resposta HTTP

Subpastas:
- normalizers/: corpo bruto → modelos internos
- routes/: endpoints HTTP

NÃO PODE conter: criptografia, encaminhamento outbound, orquestração de use cases.
"""
