"""Configuración del cliente RPC.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el cliente HTTP y la CLI lean la misma configuración.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ErrorPolicy(str, Enum):
    """How a non-2xx response is turned into an error string."""

    MESSAGE = "message"
    STATUS_LINE = "status_line"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "arkrpc"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "arkrpc"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "arkrpc"
    return Path.home() / ".config" / "arkrpc"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves existentes que no aparecen en `values` se conservan.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# arkrpc user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Todas las claves se pueden definir como `ARKRPC_<CAMPO>` en el entorno,
    en un `.env` del proyecto o en el `.env` del usuario.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARKRPC_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str | None = Field(
        default=None,
        min_length=1,
        description="Dirección base contra la que se resuelven los paths RPC.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="arkrpc/0.1",
        min_length=1,
        description="User-Agent enviado en cada llamada.",
    )

    error_policy: ErrorPolicy = Field(
        default=ErrorPolicy.MESSAGE,
        description=(
            "Cómo se construye el texto de error ante un status no-2xx: "
            "'message' lee el campo `message` del body, 'status_line' usa el status."
        ),
    )
    validate_responses: bool = Field(
        default=False,
        description="Validar el body de respuesta contra su schema antes de devolverlo.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_format: str = Field(
        default="text",
        pattern="^(json|text)$",
        description="Formato de logs: 'json' estructurado o 'text' legible.",
    )
