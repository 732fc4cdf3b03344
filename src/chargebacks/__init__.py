"""Núcleo do normalizador de chargebacks.

Subpacotes:
- expressions/: linguagem declarativa de mapeamento (compilador e avaliador)
- registry/: registry de providers e carregamento dos arquivos YAML
- validation/: schema do registro normalizado e validador
- pipeline/: orquestração e desfechos tipados
- providers/: mapeamentos distribuídos (um YAML por provider)
"""
