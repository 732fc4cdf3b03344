"""App — composição do serviço: bootstrap, contratos e observabilidade.

Subpastas:
- bootstrap/: composition root (settings, logging, construção do pipeline)
- protocols/: contratos/interfaces do núcleo
- observability/: logs estruturados, correlation_id, métricas

Padrão: app compõe; api adapta; chargebacks transforma; fsm governa; utils apoia.
"""
