# akamai_watch/report/json_report.py

"""
Генерация JSON-отчёта AkamaiWatch.

Сериализация списка изменений (ScriptChange) в файл.
"""
import json
from pathlib import Path
from typing import Iterable

from akamai_watch.tracker.models import ScriptChange


def render_json(changes: Iterable[ScriptChange], output_path: Path | str) -> Path:
    """
    Сохраняет изменения в формате JSON по указанному пути.

    :param changes: найденные изменения скриптов
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = [change.as_payload() for change in changes]

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
