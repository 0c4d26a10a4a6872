"""Точка входа: анализ одного файла изображения из командной строки."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from fruit_inspector.config import LOG_FORMAT, debug_from_env, log_level_from_env
from fruit_inspector.controllers.analysis_controller import AnalysisController
from fruit_inspector.errors import InvalidInputError
from fruit_inspector.models.verdicts import AnalysisResult
from fruit_inspector.services.fruit_catalog import get_fruit_info

LOGGER = logging.getLogger("fruit_inspector")


def _setup_logging(debug: bool | None, level: str | None, log_file: str | None) -> None:
    if level:
        lvl = getattr(logging, level.strip().upper(), None)
        if not isinstance(lvl, int):
            lvl = logging.DEBUG if debug else logging.INFO
    else:
        lvl = logging.DEBUG if debug else logging.INFO

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=lvl, format=LOG_FORMAT, handlers=handlers, force=True)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fruit type and freshness from a photo")
    parser.add_argument("image", help="Path to a JPEG, PNG or WebP image")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--record", action="store_true", help="Print only the flat history record as JSON")
    parser.add_argument("--debug", action="store_true", default=debug_from_env())
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


def format_summary(result: AnalysisResult) -> str:
    """Текстовая сводка результата со справкой по хранению фрукта."""
    info = get_fruit_info(result.fruit.fruit)
    lines = [
        f"Fruit:      {info.name} ({result.fruit.confidence}% confidence)",
        f"Freshness:  {result.freshness.category.value} "
        f"(score {result.freshness.score}/100, {result.freshness.confidence}% confidence)",
        f"            {result.freshness.explanation}",
        f"Storage:    {info.storage}",
    ]
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Анализирует изображение и печатает результат. Код возврата 2 при ошибке входа."""
    dotenv_path = find_dotenv(usecwd=True)
    load_dotenv(dotenv_path=dotenv_path, override=True)

    args = _parse_args(argv)
    level = args.log_level or (None if args.debug else log_level_from_env())
    _setup_logging(args.debug, level, args.log_file)

    controller = AnalysisController()
    try:
        result = controller.analyze_file(args.image)
    except InvalidInputError as exc:
        LOGGER.error("%s", exc)
        return 2

    if args.record:
        print(json.dumps(result.to_record().as_dict()))
    elif args.json:
        print(json.dumps(result.as_dict(), indent=2))
    else:
        print(format_summary(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
