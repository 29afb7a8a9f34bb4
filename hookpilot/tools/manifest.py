"""
HOOKPILOT - Package Manifest Automation
Injeta e remove os scripts de setup no package.json do projeto.
"""

import json
import re
from pathlib import Path
from typing import Any, Dict

from ..config import SETUP_SCRIPT_NAME
from ..core.models import HookPilotError, Tool


SETUP_RUN_COMMAND = f"npm run {SETUP_SCRIPT_NAME}"

_SETUP_RUN_FRAGMENT = re.compile(
    r"\s*&&\s*" + re.escape(SETUP_RUN_COMMAND) + r"\b"
    r"|" + re.escape(SETUP_RUN_COMMAND) + r"\b\s*(&&\s*)?"
)


class ManifestError(HookPilotError):
    """package.json ilegível ou inválido."""
    pass


def hooks_path_command(tool: Tool) -> str:
    return f"git config core.hooksPath {tool.directory}"


def inject_setup_scripts(manifest: Dict[str, Any], tool: Tool) -> Dict[str, Any]:
    """
    Adiciona `setup:git-hooks` e o encadeia no `postinstall`.

    Nunca duplica o trecho se ele já estiver presente.
    """
    scripts = manifest.setdefault("scripts", {})
    scripts[SETUP_SCRIPT_NAME] = hooks_path_command(tool)

    postinstall = scripts.get("postinstall")
    if not postinstall:
        scripts["postinstall"] = SETUP_RUN_COMMAND
    elif SETUP_RUN_COMMAND not in postinstall:
        scripts["postinstall"] = f"{postinstall} && {SETUP_RUN_COMMAND}"

    return manifest


def strip_setup_scripts(manifest: Dict[str, Any]) -> Dict[str, Any]:
    """
    Remove apenas o que `inject_setup_scripts` adicionou.

    Outros scripts, inclusive o resto do `postinstall`, ficam intactos.
    """
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        return manifest

    scripts.pop(SETUP_SCRIPT_NAME, None)

    postinstall = scripts.get("postinstall")
    if isinstance(postinstall, str) and SETUP_RUN_COMMAND in postinstall:
        cleaned = _SETUP_RUN_FRAGMENT.sub("", postinstall).strip()
        if cleaned:
            scripts["postinstall"] = cleaned
        else:
            del scripts["postinstall"]

    return manifest


def read_manifest(path: Path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ManifestError(f"{path.name} inválido: {e}")

    if not isinstance(data, dict):
        raise ManifestError(f"{path.name} deve conter um objeto no nível raiz")
    return data


def write_manifest(path: Path, manifest: Dict[str, Any]):
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding='utf-8')


__all__ = [
    "ManifestError",
    "SETUP_RUN_COMMAND",
    "hooks_path_command",
    "inject_setup_scripts",
    "strip_setup_scripts",
    "read_manifest",
    "write_manifest",
]
