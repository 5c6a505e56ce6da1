"""
Configuração por variáveis de ambiente com prefixo BUSCA_ASTAR_.
load_env_file() carrega o primeiro .env encontrado acima do pacote (chamado no import do pacote).

BUSCA_ASTAR_LOG_LEVEL          nível do logger do pacote (padrão WARNING)
BUSCA_ASTAR_LOG_JSON           1 = registros em JSON, 0 = texto (padrão 1)
BUSCA_ASTAR_TIEBREAK_INCREMENT incremento do Tiebreaker nos scripts (padrão 1e-6; 0 desliga)
BUSCA_ASTAR_GRID_SIZE          lado da grade do cenário de demonstração (padrão 100)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Mapping, Optional, TypeVar

from dotenv import load_dotenv

T = TypeVar("T")

ENV_PREFIX = "BUSCA_ASTAR_"

_PROJECT_DIRS = (Path(__file__).resolve().parent.parent, Path(__file__).resolve().parent.parent.parent)


def load_env_file(search_dirs: Optional[Iterable[Path]] = None) -> Optional[Path]:
    """
    Carrega o primeiro .env encontrado em search_dirs (padrão: raiz do projeto e o diretório acima).
    Variáveis já definidas no ambiente têm prioridade. Retorna o arquivo carregado ou None.
    """
    for directory in search_dirs if search_dirs is not None else _PROJECT_DIRS:
        env_file = Path(directory) / ".env"
        if env_file.is_file():
            load_dotenv(env_file, override=False)
            return env_file
    return None


def _read(env: Mapping[str, str], name: str, default: T, parse: Callable[[str], T]) -> T:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parse(raw.strip())
    except ValueError as e:
        raise ValueError(f"Valor inválido para {ENV_PREFIX + name}: {raw!r}") from e


def _parse_bool(raw: str) -> bool:
    value = raw.lower()
    if value in ("1", "true", "yes", "sim"):
        return True
    if value in ("0", "false", "no", "nao", "não"):
        return False
    raise ValueError(raw)


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_json: bool = True
    tiebreak_increment: float = 1e-6
    grid_size: int = 100

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            env = os.environ
        return cls(
            log_level=_read(env, "LOG_LEVEL", cls.log_level, str.upper),
            log_json=_read(env, "LOG_JSON", cls.log_json, _parse_bool),
            tiebreak_increment=_read(env, "TIEBREAK_INCREMENT", cls.tiebreak_increment, float),
            grid_size=_read(env, "GRID_SIZE", cls.grid_size, int),
        )
