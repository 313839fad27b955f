"""Erros de criptografia do endpoint de Flow.

Levantado pela infra de crypto e tratado pelo serviço de descriptografia,
que nunca o propaga para a rota.
"""


class FlowCryptoError(Exception):
    """Erro em operação criptográfica de Flow (chave, envelope ou plaintext)."""
