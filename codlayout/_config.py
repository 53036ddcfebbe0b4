"""Konfiguracja CLI — zmienne środowiskowe, opcjonalnie z pliku .env."""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

_ENV_FILE = pathlib.Path(__file__).resolve().parent.parent / ".env"


def load_env() -> None:
    """Wczytuje .env z katalogu projektu (bez nadpisywania zmiennych środowiska)."""
    load_dotenv(_ENV_FILE, override=False)


def default_dialect() -> str:
    return os.getenv("CODLAYOUT_DIALECT", "BO").strip().upper() or "BO"


def default_log_level() -> str:
    return os.getenv("CODLAYOUT_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
