"""
Endpoints da API.

Módulos disponíveis:
- activities: Atividades e prazos
- cases: Processos e seus registros vinculados
- clients: Gestão de clientes
- communications: Histórico de comunicações
- dashboard: Indicadores do painel
- documents: Metadados de documentos
- financial: Honorários, custas e indenizações
- health: Health check
- hearings: Agenda de audiências
"""
