"""Exportación JSON del listado.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite guardar una página tal como llegó, ya validada.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ListResponse


def export_list_json(*, response: ListResponse, output_path: Path) -> Path:
    """Exporta `ListResponse` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = response.model_dump(mode="json", by_alias=True, exclude_none=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
