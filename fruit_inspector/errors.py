"""Ошибки анализа изображений.

Единственный вид ошибки: входные данные непригодны для анализа
(пустой буфер, повреждённый или неподдерживаемый файл).
"""
from __future__ import annotations


class InvalidInputError(ValueError):
    """Входное изображение нельзя проанализировать."""
