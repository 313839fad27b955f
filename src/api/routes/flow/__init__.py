"""Rotas do endpoint de WhatsApp Flows."""
