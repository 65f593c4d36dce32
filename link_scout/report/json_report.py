# link_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта LinkScout.

Сериализация объекта CrawlReport в файл: один раз, по завершении обхода,
с перезаписью существующего файла.
"""
import json
from pathlib import Path

from link_scout.errors import ReportError
from link_scout.models import CrawlReport


def render_json(report: CrawlReport, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт report в формате JSON (отступ 2) по указанному пути.

    :param report: финальный CrawlReport
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    :raises ReportError: если файл не удалось создать или записать

    Пример:
    ```python
    from link_scout.report.json_report import render_json
    report_path = render_json(report, 'crawl_results.json')
    ```
    """
    output = Path(output_path)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        with output.open('w', encoding='utf-8') as f:
            json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)
            f.write('\n')
    except OSError as exc:
        raise ReportError(f"error saving results to {output}: {exc}") from exc

    return output
