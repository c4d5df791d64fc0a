"""
Utilitários de data/hora.

Todos os instantes persistidos são UTC; o fuso configurado só define
onde começa e termina o "hoje" da agenda.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from juris.core.config import settings


def utcnow() -> datetime:
    """Instante atual em UTC (timezone-aware)."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Normaliza para UTC. Datas sem fuso são tratadas como UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def local_zone() -> tzinfo:
    """Fuso usado para calcular o dia corrente."""
    if settings.TIMEZONE.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(settings.TIMEZONE)


def today_bounds(now: datetime | None = None) -> tuple[datetime, datetime]:
    """
    Intervalo semiaberto [início de hoje, início de amanhã) em UTC.

    O dia é calculado no fuso de `settings.TIMEZONE`.
    """
    zone = local_zone()
    local_now = as_utc(now or utcnow()).astimezone(zone)
    start = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    end = (start + timedelta(days=1)).replace(hour=0, minute=0, second=0, microsecond=0)
    return as_utc(start), as_utc(end)


def window_from_now(days: int, now: datetime | None = None) -> tuple[datetime, datetime]:
    """Intervalo fechado [agora, agora + N dias] em UTC."""
    start = as_utc(now or utcnow())
    return start, start + timedelta(days=days)
