"""Configuração do SDK: settings do cliente e logging estruturado."""
