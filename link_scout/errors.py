"""link_scout.errors: Исключения, которыми обмениваются слои краулера."""

from __future__ import annotations

__all__ = ["LinkScoutError", "FetchError", "ParseError", "ReportError"]


class LinkScoutError(Exception):
    """Базовое исключение LinkScout."""


class FetchError(LinkScoutError):
    """Сетевая ошибка при загрузке страницы (соединение, таймаут, неверный URL)."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class ParseError(LinkScoutError):
    """Тело ответа не удалось разобрать как HTML."""


class ReportError(LinkScoutError):
    """Не удалось создать или записать файл отчёта."""
