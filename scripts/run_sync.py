"""
CLI: sincronizacion Google Sheets <-> servicio de catalogo.

Uso recomendado:
  - Ejecutar como job (cron/systemd timer), una sola instancia a la vez.
  - El conteo de filas es el cursor: dos corridas solapadas duplican filas.

Variables de entorno requeridas:
  - CATALOG_BASE_URL
  - SPREADSHEET_ID
  - GOOGLE_CREDENTIALS_FILE (default ./credentials.json)

Ejecución:
  python scripts/run_sync.py inbound
  python scripts/run_sync.py outbound
  python scripts/run_sync.py all
  python scripts/run_sync.py status
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from loguru import logger

# Permite ejecutar este script desde cualquier cwd sin configurar PYTHONPATH.
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

# Cargar variables desde .env antes de instanciar Settings.
load_dotenv(_PROJECT_ROOT / ".env", override=False)

from baseline_connector.core.config import Settings
from baseline_connector.application.use_cases.sync_use_cases import build_from_settings


COMMANDS = ("inbound", "outbound", "all", "status")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sync Google Sheets <-> servicio de catalogo")
    parser.add_argument("command", choices=COMMANDS, nargs="?", default="all")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Nivel de log (default: LOG_LEVEL de la configuracion)",
    )
    args = parser.parse_args(argv)

    config = Settings()
    logger.remove()
    logger.add(sys.stderr, level=(args.log_level or config.LOG_LEVEL).upper())

    use_cases = build_from_settings(config)
    if args.command == "inbound":
        result = use_cases.sync_inbound()
    elif args.command == "outbound":
        result = use_cases.sync_outbound()
    elif args.command == "status":
        result = use_cases.status()
    else:
        result = use_cases.sync_all()

    print(result.model_dump_json(by_alias=True, indent=2))
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
